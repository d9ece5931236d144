from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from retail_api.dependencies import get_db
from retail_api.schemas.summary import SummaryRead
from retail_api.services.summary_service import dashboard_summary

router = APIRouter(prefix="/summary", tags=["Summary"])


@router.get("", response_model=SummaryRead)
def get_summary(db: Session = Depends(get_db)):
    return dashboard_summary(db)


__all__ = ["router"]
