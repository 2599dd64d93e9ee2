from .bijoy_to_unicode import convert_bijoy_to_unicode
from .unicode_to_bijoy import convert_unicode_to_bijoy
from .office_converter import ConversionReport, OfficeConverter
from .run_rewriter import ConversionError, MalformedPartError, convert_part

__all__ = [
    "convert_bijoy_to_unicode",
    "convert_unicode_to_bijoy",
    "ConversionReport",
    "OfficeConverter",
    "ConversionError",
    "MalformedPartError",
    "convert_part",
]
