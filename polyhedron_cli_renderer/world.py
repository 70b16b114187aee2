#
# PROJECT: polyhedron-cli-renderer
# MODULE: polyhedron_cli_renderer/world.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import time


def now_ms() -> float:
    """Wall-clock milliseconds since the epoch. Read once per tick by the loop."""
    return time.time() * 1000.0


class WorldState:
    """
    Cross-frame camera and world state.

    Stores camera Tait-Bryan angles (pitch/yaw/roll, radians), the world
    translation applied to every shape, and the frame timestamp that drives
    animated rotations.

    Input handling mutates this between frames; the geometry pipeline only
    reads it (it renders from a copy()).
    """
    __slots__ = ('camera_pitch', 'camera_yaw', 'camera_roll',
                 'translation_x', 'translation_y', 'translation_z',
                 'timestamp')

    def __init__(self, camera_pitch: float = 0.0, camera_yaw: float = 0.0,
                 camera_roll: float = 0.0, translation_x: float = 0.0,
                 translation_y: float = 0.0, translation_z: float = 0.0,
                 timestamp: float = 0.0):
        self.camera_pitch = camera_pitch
        self.camera_yaw = camera_yaw
        self.camera_roll = camera_roll    # Carried but unused by projection
        self.translation_x = translation_x
        self.translation_y = translation_y
        self.translation_z = translation_z
        self.timestamp = timestamp        # Milliseconds since epoch

    def __repr__(self):
        return (f"WorldState(pitch={self.camera_pitch:.2f}, yaw={self.camera_yaw:.2f}, "
                f"roll={self.camera_roll:.2f}, translation=({self.translation_x:.2f}, "
                f"{self.translation_y:.2f}, {self.translation_z:.2f}), "
                f"timestamp={self.timestamp:.0f})")

    @property
    def camera_angles(self):
        return (self.camera_pitch, self.camera_yaw, self.camera_roll)

    @property
    def translation(self):
        return (self.translation_x, self.translation_y, self.translation_z)

    def orbit(self, dpitch: float, dyaw: float, droll: float = 0.0):
        """Adjust camera angles by delta (radians)."""
        self.camera_pitch += dpitch
        self.camera_yaw += dyaw
        self.camera_roll += droll

    def translate(self, dx: float, dy: float, dz: float):
        """Shift the whole world by delta."""
        self.translation_x += dx
        self.translation_y += dy
        self.translation_z += dz

    def tick(self, timestamp_ms: float):
        """Set the frame timestamp. Called once at the start of each frame."""
        self.timestamp = float(timestamp_ms)

    def reset_camera(self):
        self.camera_pitch = 0.0
        self.camera_yaw = 0.0
        self.camera_roll = 0.0
        self.translation_x = 0.0
        self.translation_y = 0.0
        self.translation_z = 0.0

    def copy(self) -> 'WorldState':
        return WorldState(self.camera_pitch, self.camera_yaw, self.camera_roll,
                          self.translation_x, self.translation_y,
                          self.translation_z, self.timestamp)
