__title__ = "footway_navigator"
__description__ = "Shortest walking routes between buildings on an OpenStreetMap footway network"
__url__ = "https://github.com/footway-navigator/footway-navigator-python"
__version__ = "1.0.0"
__author__ = "Footway Navigator contributors"
__author_email__ = "footway-navigator@example.org"
__license__ = "Apache License 2.0"
