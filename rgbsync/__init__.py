from .color import ColorResolver, MouseColorResolver
from .device_manager import DeviceManager
from .errors import RGBSyncError
from .settings import load_settings
from .sync import DeviceOutcome, SyncOrchestrator, SyncResult
from .theme import ThemeExtractor
from .version import __version__
