from unittest.mock import MagicMock

import pytest

from labconvert.logging.logger import Log
from tests.helpers import build_xlsx, soil_frame


@pytest.fixture()
def log() -> MagicMock:
    return MagicMock(spec=Log)


@pytest.fixture()
def single_sheet_xlsx() -> bytes:
    return build_xlsx({"Soil": soil_frame([101, 102])})


@pytest.fixture()
def two_sheet_xlsx() -> bytes:
    return build_xlsx({"Field A": soil_frame([101]), "Field B": soil_frame([201, 202])})
