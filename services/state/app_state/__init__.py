"""App State native package exports."""

from services.state.app_state.component import COMPONENT_ID
from services.state.app_state.implementation import ChannelAppState
from services.state.app_state.service import AppState

__all__ = ["COMPONENT_ID", "AppState", "ChannelAppState"]
