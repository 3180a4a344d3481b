from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.auth.dependencies import get_current_site
from src.email_service import get_email_service
from src.rsvp.features.send_reminders.write_model import ReminderWriteModel, SqlReminderWriteModel
from src.rsvp.urls import RSVP_REMINDERS_URL
from src.tenants.dtos import WeddingSiteDTO

router = APIRouter()


class RemindersResponse(BaseModel):
    sent: int


def get_reminder_write_model() -> ReminderWriteModel:
    return SqlReminderWriteModel(email_service=get_email_service())


@router.post(RSVP_REMINDERS_URL, response_model=RemindersResponse)
async def send_rsvp_reminders(
    site: WeddingSiteDTO = Depends(get_current_site),
    write_model: ReminderWriteModel = Depends(get_reminder_write_model),
) -> RemindersResponse:
    return RemindersResponse(sent=await write_model.send_rsvp_reminders(site))
