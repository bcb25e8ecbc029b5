"""Design API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from design_studio.api.dependencies import get_current_identity, get_design_store
from design_studio.schemas.design import (
    DesignCreate,
    DesignEnvelope,
    DesignListResponse,
    DesignResponse,
)
from design_studio.services.designs import DesignStore
from design_studio.services.tokens import TokenClaims

router = APIRouter(prefix="/designs", tags=["designs"])


@router.post("", response_model=DesignEnvelope, status_code=status.HTTP_201_CREATED)
def create_design(
    design_data: DesignCreate,
    identity: Annotated[TokenClaims, Depends(get_current_identity)],
    designs: Annotated[DesignStore, Depends(get_design_store)],
):
    """Save a design for the current user."""
    design = designs.create(
        owner_id=identity.user_id,
        item_type=design_data.item_type,
        color=design_data.color,
        style=design_data.style,
        text_overlay=design_data.text_overlay,
        image_url=design_data.image_url,
    )
    return DesignEnvelope(design=DesignResponse.model_validate(design))


@router.get("", response_model=DesignListResponse)
def list_designs(
    identity: Annotated[TokenClaims, Depends(get_current_identity)],
    designs: Annotated[DesignStore, Depends(get_design_store)],
):
    """Get all designs of the current user, newest first."""
    return DesignListResponse(
        designs=[DesignResponse.model_validate(d) for d in designs.list_by_owner(identity.user_id)]
    )
