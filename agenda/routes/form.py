"""Contact form routes"""
from fastapi import APIRouter, Depends
from agenda.models.commands import CommandRequest
from agenda.models.view import PageView
from agenda.services.contacts import ContactsController
from .deps import get_controller

router = APIRouter(prefix="/form")


@router.get("", response_model=PageView)
async def get_page(controller: ContactsController = Depends(get_controller)):
    """Current form and contact list"""
    return controller.view()


@router.post("/commands", response_model=PageView)
async def post_command(data: CommandRequest, controller: ContactsController = Depends(get_controller)):
    """Apply one user action and return the re-rendered page"""
    return await controller.dispatch(data.command)
