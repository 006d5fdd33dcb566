"""
Presentation actions: create, update and list the caller's decks.
"""
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from slidedeck.core.deps import get_db, get_current_user, get_owned_presentation
from slidedeck.models.presentation import Presentation
from slidedeck.models.user import User
from slidedeck.schemas.common import ActionResponse
from slidedeck.schemas.presentation import (
    PresentationCreate,
    PresentationUpdate,
    PresentationOut,
    PresentationData,
    PresentationListData,
)
from slidedeck.services.audit import log_action, get_client_info, AuditAction, TargetType

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/actions", tags=["presentations"])


def _presentation_response(presentation: Presentation) -> ActionResponse[PresentationData]:
    return ActionResponse[PresentationData](
        data=PresentationData(presentation=PresentationOut.model_validate(presentation))
    )


@router.post("/createPresentation", response_model=ActionResponse[PresentationData])
def create_presentation(
    data: PresentationCreate,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Create a new presentation owned by the current user.

    The deck starts with a slide count of zero.
    """
    ip_address, user_agent = get_client_info(request)
    now = datetime.now(timezone.utc)

    presentation = Presentation(
        user_id=current_user.id,
        title=data.title,
        description=data.description,
        theme=data.theme,
        aspect_ratio=data.aspect_ratio,
        slide_count=0,
        created_at=now,
        updated_at=now,
    )
    db.add(presentation)
    db.commit()
    db.refresh(presentation)

    log_action(
        db=db,
        action=AuditAction.CREATE_PRESENTATION,
        user_id=current_user.id,
        target_type=TargetType.PRESENTATION,
        target_id=presentation.id,
        details={"title": presentation.title},
        ip_address=ip_address,
        user_agent=user_agent,
    )

    logger.info(f"Presentation created: {presentation.id} by user {current_user.id}")

    return _presentation_response(presentation)


@router.post("/updatePresentation", response_model=ActionResponse[PresentationData])
def update_presentation(
    data: PresentationUpdate,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Update the supplied fields of a presentation.

    Fields that are omitted are left untouched; null is rejected. slideCount may be
    overwritten directly.
    """
    ip_address, user_agent = get_client_info(request)
    presentation = get_owned_presentation(db, data.id, current_user.id)

    changes = data.changes()
    for field, value in changes.items():
        setattr(presentation, field, value)
    presentation.updated_at = datetime.now(timezone.utc)

    db.commit()
    db.refresh(presentation)

    log_action(
        db=db,
        action=AuditAction.UPDATE_PRESENTATION,
        user_id=current_user.id,
        target_type=TargetType.PRESENTATION,
        target_id=presentation.id,
        details={"fields": sorted(changes)},
        ip_address=ip_address,
        user_agent=user_agent,
    )

    return _presentation_response(presentation)


@router.post("/listPresentations", response_model=ActionResponse[PresentationListData])
def list_presentations(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    List all presentations owned by the current user.
    """
    presentations = db.query(Presentation).filter(
        Presentation.user_id == current_user.id
    ).all()

    items = [PresentationOut.model_validate(p) for p in presentations]
    return ActionResponse[PresentationListData](
        data=PresentationListData(items=items, total=len(items))
    )
