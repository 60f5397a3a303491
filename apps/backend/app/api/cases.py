from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy import func
from app.database import get_db
from crm_shared.models import Case
from crm_shared.mapping import case_item_to_row, case_row_to_item, case_update_to_row
from crm_shared.utils.errors import CaseNotFound, CaseStoreError, CrmError, DuplicateCaseNumber
from app.schemas.case import CaseCreate, CaseResponse, CaseSummary, CaseUpdate
from typing import Dict, List, Optional
from uuid import uuid4
import logging

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/cases", tags=["cases"])

ERROR_RESPONSES = {
    404: {"description": "Case not found (body is null)"},
    409: {"description": "Case number already exists"},
    503: {"description": "Database not configured"},
}


async def _load_case(db: AsyncSession, case_id: str) -> Case:
    stmt = select(Case).where(Case.id == case_id)
    result = await db.execute(stmt)
    case = result.scalar_one_or_none()
    if not case:
        raise CaseNotFound(case_id)
    return case


async def _count_by(db: AsyncSession, column) -> Dict[str, int]:
    stmt = select(column, func.count()).group_by(column)
    result = await db.execute(stmt)
    return {value: count for value, count in result.all()}


@router.get(
    "",
    response_model=List[CaseResponse],
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def list_cases(
    case_number: Optional[str] = Query(None, alias="caseNumber"),
    db: AsyncSession = Depends(get_db),
):
    """List all cases, most recently updated first, or the one matching caseNumber"""
    try:
        if case_number:
            stmt = select(Case).where(Case.case_number == case_number).limit(1)
        else:
            stmt = select(Case).order_by(Case.updated_at.desc())
        result = await db.execute(stmt)
        return [case_row_to_item(row) for row in result.scalars().all()]
    except Exception as e:
        logger.error(f"[cases] List cases error: {e}", exc_info=True)
        raise CaseStoreError("Failed to list cases")


@router.get("/summary", response_model=CaseSummary, responses=ERROR_RESPONSES)
async def summarize_cases(db: AsyncSession = Depends(get_db)):
    """Case counts by status, priority, SLA status and type"""
    try:
        total = (await db.execute(select(func.count()).select_from(Case))).scalar_one()
        return CaseSummary(
            total=total,
            by_status=await _count_by(db, Case.status),
            by_priority=await _count_by(db, Case.priority),
            by_sla_status=await _count_by(db, Case.sla_status),
            by_type=await _count_by(db, Case.type),
        )
    except Exception as e:
        logger.error(f"[cases] Summarize cases error: {e}", exc_info=True)
        raise CaseStoreError("Failed to summarize cases")


@router.post(
    "",
    response_model=CaseResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def create_case(
    case_create: CaseCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new case"""
    try:
        new_case = Case(id=str(uuid4()), **case_item_to_row(case_create))
        db.add(new_case)
        await db.commit()
        await db.refresh(new_case)

        logger.info(f"[cases] Created case: {new_case.id} ({new_case.case_number})")
        return case_row_to_item(new_case)
    except IntegrityError:
        await db.rollback()
        logger.warning(f"[cases] Duplicate case number on create: {case_create.case_number}")
        raise DuplicateCaseNumber(case_create.case_number)
    except Exception as e:
        logger.error(f"[cases] Create case error: {e}", exc_info=True)
        await db.rollback()
        raise CaseStoreError("Failed to create case")


@router.get(
    "/{case_id}",
    response_model=CaseResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def get_case(
    case_id: str,
    db: AsyncSession = Depends(get_db),
):
    """Get case details"""
    try:
        case = await _load_case(db, case_id)
        return case_row_to_item(case)
    except CrmError:
        raise
    except Exception as e:
        logger.error(f"[cases] Get case error: {e}", exc_info=True)
        raise CaseStoreError("Failed to get case")


@router.patch(
    "/{case_id}",
    response_model=CaseResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def update_case(
    case_id: str,
    case_update: Optional[CaseUpdate] = Body(None),
    db: AsyncSession = Depends(get_db),
):
    """Update the supplied fields of a case. A null body changes nothing."""
    try:
        case = await _load_case(db, case_id)

        update_data = case_update_to_row(case_update) if case_update is not None else {}
        if not update_data:
            return case_row_to_item(case)

        for field, value in update_data.items():
            setattr(case, field, value)

        await db.commit()
        await db.refresh(case)

        logger.info(f"[cases] Updated case: {case.id} ({', '.join(sorted(update_data))})")
        return case_row_to_item(case)
    except CrmError:
        raise
    except IntegrityError:
        await db.rollback()
        logger.warning(f"[cases] Duplicate case number on update: {case_update.case_number}")
        raise DuplicateCaseNumber(case_update.case_number)
    except Exception as e:
        logger.error(f"[cases] Update case error: {e}", exc_info=True)
        await db.rollback()
        raise CaseStoreError("Failed to update case")


@router.delete(
    "/{case_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=ERROR_RESPONSES,
)
async def delete_case(
    case_id: str,
    db: AsyncSession = Depends(get_db),
):
    """Delete case"""
    try:
        case = await _load_case(db, case_id)

        await db.delete(case)
        await db.commit()

        logger.info(f"[cases] Deleted case: {case_id}")
    except CrmError:
        raise
    except Exception as e:
        logger.error(f"[cases] Delete case error: {e}", exc_info=True)
        await db.rollback()
        raise CaseStoreError("Failed to delete case")
