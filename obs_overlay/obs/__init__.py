"""OBS WebSocket 연동"""
from .obs_client import (
    OBSClient,
    OBSConnectionError,
    OBSError,
    OBSRequestError,
    SceneItem,
)

__all__ = ["OBSClient", "OBSConnectionError", "OBSError", "OBSRequestError", "SceneItem"]
