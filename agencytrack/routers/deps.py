"""Request dependencies shared by the routers."""
from fastapi import Request

from ..config.config_manager import ConfigManager
from ..core.store import AgencyState


def get_state(request: Request) -> AgencyState:
    return request.app.state.agency


def get_config(request: Request) -> ConfigManager:
    return request.app.state.config
