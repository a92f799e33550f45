"""
Consecutive-frame alert gating.
"""

from dataclasses import dataclass

from ..core.constants import DEFAULT_ALERT_RUN_LENGTH


@dataclass(frozen=True)
class DetectionState:
    """Snapshot of the consecutive frame counters."""
    fire_frames: int = 0
    smoke_frames: int = 0


class AlertStateMachine:
    """
    Two independent run counters gating the alert.

    Each counter grows by one on a frame where its condition holds and
    drops to zero otherwise. The alert holds only on frames where both
    counters are at least ``run_length``; it is not latched.

    Args:
        run_length: Consecutive frames required on both signals
    """

    def __init__(self, run_length: int = DEFAULT_ALERT_RUN_LENGTH):
        if run_length < 1:
            raise ValueError(f"run_length must be >= 1, got {run_length}")
        self.run_length = run_length
        self.fire_frames = 0
        self.smoke_frames = 0

    def update(self, fire_condition: bool, smoke_condition: bool) -> bool:
        """
        Advance both counters by one frame.

        Returns:
            Alert flag for this frame
        """
        self.fire_frames = self.fire_frames + 1 if fire_condition else 0
        self.smoke_frames = self.smoke_frames + 1 if smoke_condition else 0
        return self.alert

    @property
    def alert(self) -> bool:
        return self.fire_frames >= self.run_length and self.smoke_frames >= self.run_length

    @property
    def state(self) -> DetectionState:
        return DetectionState(fire_frames=self.fire_frames, smoke_frames=self.smoke_frames)

    def reset(self):
        """Reset both counters."""
        self.fire_frames = 0
        self.smoke_frames = 0

    def __repr__(self) -> str:
        return (
            f"AlertStateMachine(run_length={self.run_length}, "
            f"fire_frames={self.fire_frames}, smoke_frames={self.smoke_frames})"
        )
