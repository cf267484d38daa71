"""Feature extraction helpers for Isola."""

from .observation import BOARD_CHANNELS, build_board_tensor

__all__ = ["BOARD_CHANNELS", "build_board_tensor"]
