"""Pydantic schemas for the ride service's wire documents."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ridejoin.domain.entities import Creator, Location, Place, RideSummary


class PlaceDocument(BaseModel):
    place: str
    # GeoJSON order: [longitude, latitude]
    coordinates: Optional[list[float]] = Field(None, min_length=2, max_length=2)

    def to_entity(self) -> Place:
        location = None
        if self.coordinates:
            lng, lat = self.coordinates
            location = Location(latitude=lat, longitude=lng)
        return Place(name=self.place, location=location)


class PreferencesDocument(BaseModel):
    smoking: Optional[str] = None
    music: Optional[str] = None


class ProfileDocument(BaseModel):
    preferences: PreferencesDocument = Field(default_factory=PreferencesDocument)


class CreatorDocument(BaseModel):
    id: str = Field(..., alias="_id")
    name: str
    stars: Optional[float] = None
    rides_created: list[str] = Field(default_factory=list, alias="ridesCreated")
    profile: ProfileDocument = Field(default_factory=ProfileDocument)

    model_config = {"populate_by_name": True, "extra": "ignore"}

    def to_entity(self) -> Creator:
        return Creator(
            id=self.id,
            name=self.name,
            stars=self.stars,
            rides_published=len(self.rides_created),
            smoking=self.profile.preferences.smoking,
            music=self.profile.preferences.music,
        )


class RideDocument(BaseModel):
    id: str = Field(..., alias="_id")
    origin: PlaceDocument
    destination: PlaceDocument
    start_time: datetime = Field(..., alias="startTime")
    end_time: datetime = Field(..., alias="endTime")
    available_seats: int = Field(..., ge=0, alias="availableSeats")
    price: float = Field(..., ge=0)
    tags: list[str] = Field(default_factory=list)
    creator: CreatorDocument
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    model_config = {"populate_by_name": True, "extra": "ignore"}

    def to_entity(self) -> RideSummary:
        return RideSummary(
            id=self.id,
            origin=self.origin.to_entity(),
            destination=self.destination.to_entity(),
            start_time=self.start_time,
            end_time=self.end_time,
            available_seats=self.available_seats,
            price=self.price,
            creator=self.creator.to_entity(),
            tags=tuple(self.tags),
            created_at=self.created_at,
        )
