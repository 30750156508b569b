"""Node handlers for the analysis pass."""

# Import handlers to trigger registration
from . import document
from . import statements
from . import ranges
from . import arguments
from . import inference
from . import relations
