"""Conversions between repository records and DTOs."""

from __future__ import annotations

from espressoapi.dto import BeansDTO, RoasterDTO, SheetDTO, ShotDTO
from espressoapi.repositories.interfaces import (
    BeansRecord,
    RoasterRecord,
    SheetRecord,
    ShotRecord,
)


def sheet_from_record(record: SheetRecord) -> SheetDTO:
    return SheetDTO(
        id=record.id,
        name=record.name,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def record_from_sheet(dto: SheetDTO) -> SheetRecord:
    return SheetRecord(
        id=dto.id,
        name=dto.name,
        created_at=dto.created_at,
        updated_at=dto.updated_at,
    )


def roaster_from_record(record: RoasterRecord) -> RoasterDTO:
    return RoasterDTO(
        id=record.id,
        name=record.name,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def record_from_roaster(dto: RoasterDTO) -> RoasterRecord:
    return RoasterRecord(
        id=dto.id,
        name=dto.name,
        created_at=dto.created_at,
        updated_at=dto.updated_at,
    )


def beans_from_record(record: BeansRecord) -> BeansDTO:
    return BeansDTO(
        id=record.id,
        roaster=roaster_from_record(record.roaster) if record.roaster is not None else None,
        name=record.name,
        roast_date=record.roast_date,
        roast_level=record.roast_level,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def record_from_beans(dto: BeansDTO) -> BeansRecord:
    return BeansRecord(
        id=dto.id,
        roaster=record_from_roaster(dto.roaster) if dto.roaster is not None else None,
        name=dto.name,
        roast_date=dto.roast_date,
        roast_level=dto.roast_level,
        created_at=dto.created_at,
        updated_at=dto.updated_at,
    )


def shot_from_record(record: ShotRecord) -> ShotDTO:
    return ShotDTO(
        id=record.id,
        sheet=sheet_from_record(record.sheet) if record.sheet is not None else None,
        beans=beans_from_record(record.beans) if record.beans is not None else None,
        grind_setting=record.grind_setting,
        quantity_in=record.quantity_in,
        quantity_out=record.quantity_out,
        shot_time=record.shot_time,
        water_temperature=record.water_temperature,
        rating=record.rating,
        is_too_bitter=record.is_too_bitter,
        is_too_sour=record.is_too_sour,
        comparison_with_previous=record.comparison_with_previous,
        additional_notes=record.additional_notes,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def record_from_shot(dto: ShotDTO) -> ShotRecord:
    return ShotRecord(
        id=dto.id,
        sheet=record_from_sheet(dto.sheet) if dto.sheet is not None else None,
        beans=record_from_beans(dto.beans) if dto.beans is not None else None,
        grind_setting=dto.grind_setting,
        quantity_in=dto.quantity_in,
        quantity_out=dto.quantity_out,
        shot_time=dto.shot_time,
        water_temperature=dto.water_temperature,
        rating=dto.rating,
        is_too_bitter=dto.is_too_bitter,
        is_too_sour=dto.is_too_sour,
        comparison_with_previous=dto.comparison_with_previous,
        additional_notes=dto.additional_notes,
        created_at=dto.created_at,
        updated_at=dto.updated_at,
    )
