"Contains the configuration object that can be passed to the navigator, as well as default values"
from io import TextIOBase
from json import loads, dumps
from typing import NamedTuple, List, Tuple, Union, Optional

#: The default value for the `footway_tags` config option.
#: A way is a footway if it carries any of these (key, value) tags.
DEFAULT_FOOTWAY_TAGS = [
    ("highway", "footway"),
    ("area:highway", "footway"),
]


class Config(NamedTuple):
    """A config object that provides all settings that influence the navigator's behaviour

    Customize the values where the default won't fit you:

        >>> myconfig = Config(map_file="campus.osm", precision=6)
    """

    #: The map file that is loaded when no other file is given
    map_file: str = "map.osm"
    #: Tags identifying footways. A way carrying any of these (key, value) pairs
    #: becomes part of the walking network.
    footway_tags: List[Tuple[str, str]] = DEFAULT_FOOTWAY_TAGS
    #: The (key, value) tag identifying the buildings routes can start and end at
    building_tag: Tuple[str, str] = ("building", "university")
    #: Number of significant digits when printing coordinates and distances
    precision: int = 8
    #: Name of the unit that distances are reported in
    distance_unit: str = "miles"


DEFAULT_CONFIG = Config()


def load_config(source: Union[str, TextIOBase, dict]) -> Config:
    """Load config from a source

    Keys missing from the source keep their default value.

    Args:
        source:
            Either an open text file containing a JSON dict, or the path to it, or a dictionary
    Returns:
        The read Config object
    """
    opened_source = source
    if isinstance(opened_source, str):
        with open(source, "r") as filepointer:
            # Call the TextIOBase code path
            return load_config(filepointer)
    if isinstance(opened_source, TextIOBase):
        opened_source = loads(opened_source.read())
    if not isinstance(opened_source, dict):
        raise TypeError("Surprising type")
    unknown = set(opened_source) - set(Config._fields)
    if unknown:
        raise ValueError(f"Unknown config options: {', '.join(sorted(unknown))}")
    values = DEFAULT_CONFIG._asdict()
    values.update(opened_source)
    return Config(
        map_file=values["map_file"],
        footway_tags=[(key, value) for (key, value) in values["footway_tags"]],
        building_tag=tuple(values["building_tag"]),
        precision=int(values["precision"]),
        distance_unit=values["distance_unit"],
    )


NoneType: object = type(None)


def save_config(config: Config, dest: Union[str, TextIOBase, NoneType] = None) -> Optional[dict]:
    """Saves a config to a file or a dictionary

    Args:
        config:
            The config.
        dest:
            Either a path, or an already write-opened text file, or nothing.
    Returns:
        If no destination was given, returns the config as dictionary"""
    if dest is None:
        return config._asdict()
    if isinstance(dest, str):
        with open(dest, "w") as filepointer:
            # Call the TextIOBase code path
            save_config(config, filepointer)
    elif isinstance(dest, TextIOBase):
        dest.write(dumps(save_config(config)))
    else:
        raise TypeError("`dest` has to be a valid destination")
