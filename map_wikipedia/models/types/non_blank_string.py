from typing import Annotated

from pydantic import StringConstraints

# Tiny type to validate a non-blank string.
NonBlankString = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
