"""
Minimal configuration template for maze_walker
"""

MINIMAL_CONFIG_TEMPLATE = """# Maze Walker Configuration
# ============================================================================
# Every value below is optional; omitted values use the defaults shown.
# Command-line flags override anything set here.

version: 1
description: "My maze settings"

# Search
# ----------------------------------------------------------------------------
search:
  # Expansion order:
  #   stack    - last discovered cell is expanded first (default)
  #   priority - lowest g + h first (A*-style)
  frontier: "stack"

  # When an open node adopts a newly found distance:
  #   reference - when the cached distance is smaller (default)
  #   shortest  - when the cached distance is larger (shortest-path relaxation)
  relaxation: "reference"

  # Distance estimate to the target: squared_euclidean (default) or manhattan
  heuristic: "squared_euclidean"

# Map loading
# ----------------------------------------------------------------------------
grid:
  # Reject maps whose rows are not all as long as the first row
  strict_rows: false

# Output
# ----------------------------------------------------------------------------
output:
  format: "text"              # Options: text, json
  preserve_endpoints: false   # Keep 'o' and 'x' visible under the '*' overlay
  show_path: false            # Print path coordinates after the map (text)
  json_indent: 2

  # Values may reference environment variables, e.g.:
  # format: "${WALKER_FORMAT:-text}"
"""
