# ui/widgets/atlas/constants.py

# Z-values for rendering order
Z_RADAR         = 0
Z_MARKER        = 2
Z_LABEL         = 3
Z_SELECTION     = 4

# Marker icon geometry (screen pixels, unaffected by zoom)
ICON_SIZE       = 32
ICON_ANCHOR     = (16, 32)    # bottom centre sits on the location
LABEL_OFFSET_Y  = -52         # label baseline above the marker tip

# Radar overlays sit one latitude unit above their marker
RADAR_LAT_OFFSET = 1

# Web-map style zoom: scale = 2 ** zoom
ZOOM_STEP       = 0.5

# Keeps the scene rect large enough to pan freely past the outermost markers
ANCHOR_DISTANCE = 50000
