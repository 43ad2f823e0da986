from .chat import router as chat
from .health import router as health
