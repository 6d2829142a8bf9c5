from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from profile_api.application.use_cases.get_profile import GetProfileUseCase
from profile_api.domain.entities.profile import ProfileEntity
from profile_api.infrastructure.config import Settings
from profile_api.infrastructure.facts.cat_fact_client import CatFactClient


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_profile(settings: Annotated[Settings, Depends(get_settings)]) -> ProfileEntity:
    return settings.profile


def get_fact_client(request: Request) -> CatFactClient:
    return request.app.state.fact_client


def get_profile_use_case(
    profile: Annotated[ProfileEntity, Depends(get_profile)],
    facts: Annotated[CatFactClient, Depends(get_fact_client)],
) -> GetProfileUseCase:
    return GetProfileUseCase(profile=profile, facts=facts)
