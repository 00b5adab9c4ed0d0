# lexsim/text_processor/__init__.py
from .base import BaseTextProcessor, Profile
from .standard_processor import StandardTextProcessor
