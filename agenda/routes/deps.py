"""Request dependencies"""
from fastapi import Request
from agenda.services.contacts import ContactStore, ContactsController


def get_store(request: Request) -> ContactStore:
    return request.app.state.store


def get_controller(request: Request) -> ContactsController:
    return request.app.state.controller
