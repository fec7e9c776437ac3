#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bigfmt.display import default_formatter


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def restore_suffixes():
    """Restore the default formatter suffix table after a test replaces it."""
    previous = default_formatter.suffixes
    yield default_formatter
    default_formatter.set_suffixes(previous)
