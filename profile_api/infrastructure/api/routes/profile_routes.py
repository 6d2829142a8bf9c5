from __future__ import annotations

from fastapi import APIRouter, Depends, status

from profile_api.application.dtos.profile_dto import ProfileResponse
from profile_api.application.use_cases.get_profile import GetProfileUseCase
from profile_api.infrastructure.api.dependencies import get_profile_use_case

router = APIRouter(tags=["Profile"])


@router.get(
    "/me",
    response_model=ProfileResponse,
    status_code=status.HTTP_200_OK,
    summary="Get Profile",
    description="""
    Return the static profile together with a random cat fact and the current UTC time.

    This endpoint always answers with **200 OK**. When the cat fact API times out,
    fails or returns an unexpected body, the `fact` field carries a message starting
    with `Fact retrieval failed:` instead of a fact.
    """,
    response_description="Profile, timestamp and cat fact",
)
async def get_me(use_case: GetProfileUseCase = Depends(get_profile_use_case)):
    """Get the profile enriched with a dynamic cat fact."""
    return await use_case.execute()
