from .faq import FaqCategory, FaqItem, IntentPatternRecord
from .chat import ChatSession, Message, MessageType
