"""Application services shared by command handlers."""

from src.application.services.device_session_writer import DeviceSessionWriter

__all__ = ["DeviceSessionWriter"]
