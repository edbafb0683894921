import pytest

import test_base


@pytest.fixture(autouse=True)
def harness_failures():
    before = test_base.TestBase.total_failures
    yield
    failures = test_base.TestBase.total_failures - before
    assert failures == 0, f'{failures} check(s) failed, see captured stdout'
