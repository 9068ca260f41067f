from __future__ import annotations

from pathlib import Path

import pytest

here = Path(__file__).parent
root_path = here.parent


@pytest.fixture
def user_lookup_log() -> str:
    return (
        "2024-05-02 10:15:01.123 DEBUG 4242 --- [main] c.e.m.UserMapper.selectById : "
        "==>  Preparing: SELECT * FROM t WHERE id = ? AND name = ?\n"
        "2024-05-02 10:15:01.124 DEBUG 4242 --- [main] c.e.m.UserMapper.selectById : "
        "==> Parameters: 1(Integer), John(String)\n"
        "2024-05-02 10:15:01.130 DEBUG 4242 --- [main] c.e.m.UserMapper.selectById : "
        "<==      Total: 1\n"
    )
