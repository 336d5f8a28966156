"""Pass routes: sell, list, fetch and cancel gym and pool passes."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from reservations.core.database import get_db
from reservations.models.facility_pass import Pass, PassStatus
from reservations.schemas import PassCreate, PassOut
from reservations.services.facilities import facility_name
from reservations.services.passes import PassType, check_pass_facility, pass_end_date

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/passes", tags=["passes"])


async def _get_pass(db: AsyncSession, pass_id: int) -> Pass:
    result = await db.execute(select(Pass).where(Pass.id == pass_id))
    found = result.scalar_one_or_none()
    if not found:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pass not found")
    return found


@router.post("", response_model=PassOut, status_code=status.HTTP_201_CREATED)
async def create_pass(
    body: PassCreate,
    db: AsyncSession = Depends(get_db),
):
    violation = check_pass_facility(body.facility)
    if violation:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=[{"rule": violation.rule, "message": violation.message}],
        )

    new_pass = Pass(
        facility=facility_name(body.facility),
        pass_type=body.pass_type,
        start_date=body.start_date,
        end_date=pass_end_date(body.start_date, body.pass_type),
        status=PassStatus.ACTIVE,
        name=body.name,
        email=body.email,
        phone=body.phone,
        national_id=body.national_id,
        is_resident=body.is_resident,
        price=body.price,
    )
    db.add(new_pass)
    await db.flush()
    await db.refresh(new_pass)

    logger.info(
        "Pass %s created: %s %s from %s to %s",
        new_pass.id,
        new_pass.pass_type.value,
        new_pass.facility,
        new_pass.start_date,
        new_pass.end_date,
    )
    return new_pass


@router.get("", response_model=list[PassOut])
async def list_passes(
    facility: str | None = Query(None),
    pass_type: PassType | None = Query(None),
    email: str | None = Query(None),
    include_inactive: bool = Query(False),
    db: AsyncSession = Depends(get_db),
):
    """Active passes, newest start first. include_inactive adds cancelled ones."""
    query = select(Pass)
    if facility is not None:
        query = query.where(Pass.facility == facility_name(facility))
    if pass_type is not None:
        query = query.where(Pass.pass_type == pass_type)
    if email is not None:
        query = query.where(Pass.email == email)
    if not include_inactive:
        query = query.where(Pass.status == PassStatus.ACTIVE)

    result = await db.execute(query.order_by(Pass.start_date.desc(), Pass.id.desc()).limit(200))
    return result.scalars().all()


@router.get("/{pass_id}", response_model=PassOut)
async def get_pass(
    pass_id: int,
    db: AsyncSession = Depends(get_db),
):
    return await _get_pass(db, pass_id)


@router.delete("/{pass_id}", status_code=status.HTTP_204_NO_CONTENT)
async def cancel_pass(
    pass_id: int,
    db: AsyncSession = Depends(get_db),
):
    found = await _get_pass(db, pass_id)
    if found.status == PassStatus.CANCELLED:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=[{"rule": "already_cancelled", "message": "Pass is already cancelled."}],
        )

    # Kept for the record, hidden from the default listing
    found.status = PassStatus.CANCELLED
    logger.info("Pass %s cancelled", found.id)
