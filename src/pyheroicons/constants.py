"""Application-wide constants for pyheroicons.

Constants are grouped into the following categories:
- SVG Constants: Namespace, canonical dimensions and variant defaults
- Sanitizer Constants: Reserved attribute names and event handler allowlist
- Dataset Constants: Remote source, cache file and retry settings
- Codegen Constants: Generated module location and naming rules
- Server Constants: Demo server defaults
"""

# SVG constants
SVG_NAMESPACE = "http://www.w3.org/2000/svg"  # Value of the xmlns attribute
DEFAULT_CANONICAL_SIZE = "24"  # Coordinate space for Outline/Solid and unknown variants
MINI_CANONICAL_SIZE = "20"  # Coordinate space for Mini icons
MICRO_CANONICAL_SIZE = "16"  # Coordinate space for Micro icons
DEFAULT_STROKE = "currentColor"  # Outline stroke when no override is set
DEFAULT_STROKE_WIDTH = "1.5"  # Outline stroke width when no override is set
DEFAULT_OUTLINE_FILL = "none"  # Outline icons are stroked, not filled
DEFAULT_SOLID_FILL = "currentColor"  # Fill for Solid, Mini and Micro icons
ERROR_COMMENT_TEMPLATE = "<!-- Error: {error} -->"  # Rendered in place of a broken icon

# Sanitizer constants
# Attributes the renderer always controls; extra attrs can never override them
RESERVED_SVG_ATTRIBUTES = frozenset(
    {"xmlns", "viewBox", "width", "height", "stroke-width", "stroke", "fill"}
)
# Event handlers allowed through when their value looks harmless
ALLOWED_EVENT_ATTRIBUTES = frozenset({"onclick", "onchange", "onhover"})
# Lower-cased markers that disqualify an event handler value
UNSAFE_EVENT_VALUE_MARKERS = ("<script", "javascript:")

# Dataset constants
DATASET_URL = (
    "https://raw.githubusercontent.com/iconify/icon-sets/refs/heads/master/json/heroicons.json"
)
DATASET_FILENAME = "heroicons_cache.json"  # Bundled dataset and local cache file name
DATASET_CACHE_MAX_AGE_DAYS = 30  # Cache file is fresh for this many days
DATASET_RETRY_ATTEMPTS = 3  # Maximum HTTP attempts before giving up
DATASET_RETRY_DELAY_SECONDS = 5.0  # Fixed delay between attempts
DATASET_TIMEOUT_SECONDS = 30.0  # HTTP timeout per attempt
SECONDS_PER_DAY = 24 * 60 * 60

# Codegen constants
GENERATED_MODULE_FILENAME = "icons.py"  # Generated constants module inside the package
GENERATED_MODULE_TEMPLATE = "icons_module.py.j2"  # Jinja2 template for the generated module
# Name fragments stripped from iconify names before building identifiers
ICON_NAME_VARIANT_FRAGMENTS = ("-16", "-20", "-solid")

# Server constants
APP_DIR_NAME = "pyheroicons"  # Directory name for config and cache locations
CLI_PROG_NAME = "pyheroicons"  # Program name in CLI usage and error output
DEFAULT_SERVER_HOST = "127.0.0.1"
DEFAULT_SERVER_PORT = 8000
DEMO_ICON_SIZE = 32  # Rendered size of icons on the gallery page
GALLERY_TEMPLATE = "gallery.html.j2"
SVG_MEDIA_TYPE = "image/svg+xml"

# Unit conversion constants
BYTES_PER_MEGABYTE = 1024 * 1024
