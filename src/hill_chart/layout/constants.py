"""Default layout constants for hill chart geometry.

All distances are in pixels of the chart area (the canvas minus its
margins), except CLUSTER_THRESHOLD which is in progress percent.
"""

# Chart area
CHART_WIDTH: float = 900.0
CHART_HEIGHT: float = 460.0
CANVAS_PADDING: float = 30.0

# Hill curve
HILL_PEAK_PROGRESS: float = 50.0
HILL_MAX_HEIGHT: float = 100.0

# Label text estimation
CHAR_WIDTH: float = 7.0
TEXT_MAX_WIDTH: float = 200.0
TEXT_LINE_HEIGHT: float = 18.0
LABEL_H_PADDING: float = 10.0
LABEL_V_PADDING: float = 8.0
MAX_LABEL_LINES: int = 4

# Clustering
CLUSTER_THRESHOLD: float = 3.0
CLUSTER_GAP: float = 10.0  # Extra space between stacked labels in a cluster
MIN_VERTICAL_SPACING: float = 50.0
JITTER: float = 5.0
JITTER_MIN_GROUP: int = 5

# Label side zones (progress percent)
LEFT_ZONE_END: float = 35.0
RIGHT_ZONE_START: float = 65.0

# Collision resolution
MIN_LABEL_SEPARATION: float = 15.0
MIN_LABEL_TO_POINT_DISTANCE: float = 30.0
DOT_RADIUS: float = 10.0
DOT_CLEARANCE: float = 5.0
MAX_COLLISION_ITERATIONS: int = 20
