"""
structmeta Constants

Static values shared by the extractor, the document assembler and the CLI.
"""

# --- Document ---

# Source-kind tag; every document is extracted from Go declarations
SRC_KIND = "go"

# Default generator kind written to the document's `kind` field
DEFAULT_KIND = "go"

# Output path sentinel that selects stdout
STDOUT_SENTINEL = "-"

DEFAULT_OUTPUT_EXT = ".json"
DEFAULT_INDENT = "\t"

# --- Types ---

# Rendered in place of a type expression the resolver does not understand.
# Not a valid Go type, so it never collides with a real one.
INVALID_TYPE = "---"

# --- Tags ---

# Struct-tag keys promoted to named member fields
TAG_FAKER = "faker"
TAG_FIXTURE = "fixture"
TAG_JSON = "json"
TAG_DB = "db"
TAG_GRAPHQL = "graphql"

# Fixture values with this prefix are emitted as quoted string literals
FIXTURE_STRING_PREFIX = "string:"

# --- Naming ---

# Go initialisms kept fully upper-case in camel identifiers (golint list)
COMMON_INITIALISMS = frozenset({
    "ACL", "API", "ASCII", "CPU", "CSS", "DNS", "EOF", "GUID", "HTML",
    "HTTP", "HTTPS", "ID", "IP", "JSON", "LHS", "QPS", "RAM", "RHS",
    "RPC", "SLA", "SMTP", "SQL", "SSH", "TCP", "TLS", "TTL", "UDP",
    "UI", "UID", "UUID", "URI", "URL", "UTF8", "VM", "XML", "XMPP",
    "XSRF", "XSS",
})

# Pluralizations that intentionally differ from the inflection rules
PLURAL_OVERRIDES = {
    "information": "informations",
    "Information": "Informations",
}
