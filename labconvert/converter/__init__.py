from labconvert.converter.converter import Converter
from labconvert.converter.models import ConversionResult, FilenameArgs, InputFile

__all__ = ["ConversionResult", "Converter", "FilenameArgs", "InputFile"]
