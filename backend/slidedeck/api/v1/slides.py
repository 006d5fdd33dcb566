"""
Slide actions: create, update, delete and list the slides of an owned presentation.
"""
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from sqlalchemy import func
from sqlalchemy.orm import Session

from slidedeck.core.deps import get_db, get_current_user, get_owned_presentation
from slidedeck.core.exceptions import NotFoundError
from slidedeck.models.slide import Slide
from slidedeck.models.user import User
from slidedeck.schemas.common import ActionAck, ActionResponse
from slidedeck.schemas.slide import (
    SlideCreate,
    SlideUpdate,
    SlideRef,
    SlideListRequest,
    SlideOut,
    SlideData,
    SlideListData,
)
from slidedeck.services.audit import log_action, get_client_info, AuditAction, TargetType

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/actions", tags=["slides"])

SLIDE_NOT_FOUND = "スライドが見つかりません"


def _slide_response(slide: Slide) -> ActionResponse[SlideData]:
    return ActionResponse[SlideData](data=SlideData(slide=SlideOut.model_validate(slide)))


@router.post("/createSlide", response_model=ActionResponse[SlideData])
def create_slide(
    data: SlideCreate,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Append a slide to a presentation.

    Without an explicit orderIndex the slide goes after the current highest
    one (or gets 1 in an empty deck). The insert and the slide count bump are
    committed together while the presentation row is locked, so concurrent
    creates on the same deck are serialized.
    """
    ip_address, user_agent = get_client_info(request)
    presentation = get_owned_presentation(
        db, data.presentation_id, current_user.id, lock=True
    )

    max_order, existing_count = db.query(
        func.max(Slide.order_index), func.count(Slide.id)
    ).filter(Slide.presentation_id == presentation.id).one()

    if data.order_index is not None:
        next_order = data.order_index
    elif existing_count:
        next_order = (max_order or 0) + 1
    else:
        next_order = 1

    now = datetime.now(timezone.utc)
    slide = Slide(
        presentation_id=presentation.id,
        order_index=next_order,
        layout_type=data.layout_type,
        title=data.title,
        content=data.content,
        notes=data.notes,
        raw_data=data.raw_data,
        created_at=now,
        updated_at=now,
    )
    db.add(slide)

    presentation.slide_count = existing_count + 1
    presentation.updated_at = now

    db.commit()
    db.refresh(slide)

    log_action(
        db=db,
        action=AuditAction.CREATE_SLIDE,
        user_id=current_user.id,
        target_type=TargetType.SLIDE,
        target_id=slide.id,
        details={"presentation_id": presentation.id, "order_index": slide.order_index},
        ip_address=ip_address,
        user_agent=user_agent,
    )

    logger.info(
        f"Slide created: {slide.id} at position {slide.order_index} "
        f"in presentation {presentation.id}"
    )

    return _slide_response(slide)


@router.post("/updateSlide", response_model=ActionResponse[SlideData])
def update_slide(
    data: SlideUpdate,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Update the supplied fields of a slide.

    The slide must belong to the given presentation; a slide living under a
    different deck is reported as not found.
    """
    ip_address, user_agent = get_client_info(request)
    get_owned_presentation(db, data.presentation_id, current_user.id)

    slide = db.query(Slide).filter(
        Slide.id == data.id,
        Slide.presentation_id == data.presentation_id,
    ).first()

    if not slide:
        raise NotFoundError(SLIDE_NOT_FOUND)

    changes = data.changes()
    for field, value in changes.items():
        setattr(slide, field, value)
    slide.updated_at = datetime.now(timezone.utc)

    db.commit()
    db.refresh(slide)

    log_action(
        db=db,
        action=AuditAction.UPDATE_SLIDE,
        user_id=current_user.id,
        target_type=TargetType.SLIDE,
        target_id=slide.id,
        details={"presentation_id": data.presentation_id, "fields": sorted(changes)},
        ip_address=ip_address,
        user_agent=user_agent,
    )

    return _slide_response(slide)


@router.post("/deleteSlide", response_model=ActionAck)
def delete_slide(
    data: SlideRef,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Delete a slide from a presentation.

    The presentation's cached slide count is left as is.
    """
    ip_address, user_agent = get_client_info(request)
    get_owned_presentation(db, data.presentation_id, current_user.id)

    deleted = db.query(Slide).filter(
        Slide.id == data.id,
        Slide.presentation_id == data.presentation_id,
    ).delete(synchronize_session=False)

    if deleted == 0:
        db.rollback()
        raise NotFoundError(SLIDE_NOT_FOUND)

    db.commit()

    log_action(
        db=db,
        action=AuditAction.DELETE_SLIDE,
        user_id=current_user.id,
        target_type=TargetType.SLIDE,
        target_id=data.id,
        details={"presentation_id": data.presentation_id},
        ip_address=ip_address,
        user_agent=user_agent,
    )

    logger.info(f"Slide deleted: {data.id} from presentation {data.presentation_id}")

    return ActionAck()


@router.post("/listSlides", response_model=ActionResponse[SlideListData])
def list_slides(
    data: SlideListRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    List all slides in a presentation.

    No ordering is applied; clients sort by orderIndex for display.
    """
    get_owned_presentation(db, data.presentation_id, current_user.id)

    slides = db.query(Slide).filter(
        Slide.presentation_id == data.presentation_id
    ).all()

    items = [SlideOut.model_validate(s) for s in slides]
    return ActionResponse[SlideListData](
        data=SlideListData(items=items, total=len(items))
    )
