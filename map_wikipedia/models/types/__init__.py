from .language_code import LanguageCode
from .non_blank_string import NonBlankString

__all__ = ["LanguageCode", "NonBlankString"]
