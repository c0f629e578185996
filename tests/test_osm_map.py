"""
Contains the unittest for the OpenStreetMap XML map reader"""

import os
import tempfile
import unittest

from openlr import Coordinates

from footway_navigator import Config
from footway_navigator.error import MapLoadError
from footway_navigator.maps import Footway
from footway_navigator.osm_map import OsmMapReader
from footway_navigator.osm_map.primitives import building_abbreviation, centroid

from .example_mapformat import MAP_XML, NODES, FOOTWAYS, setup_testmap, remove_map_file


class OsmMapTest(unittest.TestCase):
    "A few unit tests for the OpenStreetMap reader"

    def setUp(self):
        self.reader = OsmMapReader.from_string(MAP_XML)

    def test_node_count(self):
        "Every node is read, including building outline nodes"
        self.assertEqual(self.reader.get_nodecount(), 19)
        self.assertEqual(self.reader.get_nodes()[3], NODES[3])

    def test_node_coordinates(self):
        "Node positions are stored as lon, lat"
        position = self.reader.get_nodes()[5]
        self.assertEqual(position.lat, 41.8715)
        self.assertEqual(position.lon, -87.65)

    def test_footways(self):
        "Only ways tagged as footways are footways"
        self.assertEqual(self.reader.get_footwaycount(), 4)
        self.assertSequenceEqual(self.reader.get_footways(), FOOTWAYS)

    def test_buildings(self):
        "Only university buildings with a name are read"
        names = [building.fullname for building in self.reader.get_buildings()]
        self.assertSequenceEqual(
            names, ["Science & Engineering Offices (SEO)", "University Hall (UH)", "Isolated Research Lab"]
        )
        self.assertEqual(self.reader.get_buildingcount(), 3)

    def test_building_abbreviations(self):
        "Abbreviations come from the name suffix or the short_name tag"
        abbrevs = [building.abbrev for building in self.reader.get_buildings()]
        self.assertSequenceEqual(abbrevs, ["SEO", "UH", "IRL"])

    def test_building_position(self):
        "A building is positioned at the mean of its outline nodes"
        position = self.reader.get_buildings()[0].coordinates
        self.assertAlmostEqual(position.lat, 41.8699)
        self.assertAlmostEqual(position.lon, -87.6501)

    def test_read_file(self):
        "Reading from a file gives the same result as reading a string"
        map_file = os.path.join(tempfile.gettempdir(), "footway_navigator_test.osm")
        setup_testmap(map_file)
        try:
            reader = OsmMapReader(map_file)
            self.assertEqual(reader.get_nodes(), self.reader.get_nodes())
            self.assertEqual(reader.get_footways(), self.reader.get_footways())
        finally:
            remove_map_file(map_file)

    def test_missing_file(self):
        "A nonexistent file can't be loaded"
        with self.assertRaises(MapLoadError):
            OsmMapReader(os.path.join(tempfile.gettempdir(), "does_not_exist.osm"))

    def test_invalid_xml(self):
        "Broken XML can't be loaded"
        with self.assertRaises(MapLoadError):
            OsmMapReader.from_string("<osm><node id='1'")

    def test_not_osm(self):
        "XML without an <osm> root is rejected"
        with self.assertRaises(MapLoadError):
            OsmMapReader.from_string("<gpx></gpx>")

    def test_invalid_node(self):
        "A node without position is rejected"
        with self.assertRaises(MapLoadError):
            OsmMapReader.from_string("<osm><node id='1' lat='41.0'/></osm>")

    def test_invalid_way_id(self):
        "A footway without a numeric id is rejected"
        nodes = '<node id="1" lat="1" lon="1"/>'
        tags = '<nd ref="1"/><tag k="highway" v="footway"/>'
        with self.assertRaises(MapLoadError):
            OsmMapReader.from_string(f"<osm>{nodes}<way>{tags}</way></osm>")
        with self.assertRaises(MapLoadError):
            OsmMapReader.from_string(f'<osm>{nodes}<way id="walk">{tags}</way></osm>')

    def test_configured_tags(self):
        "Footway and building tags can be configured"
        config = Config(footway_tags=[("highway", "residential")], building_tag=("building", "yes"))
        reader = OsmMapReader.from_string(MAP_XML, config)
        self.assertSequenceEqual(reader.get_footways(), [Footway(1004, (2, 5))])
        self.assertSequenceEqual(
            [building.abbrev for building in reader.get_buildings()], ["PS"]
        )

    def test_building_abbreviation(self):
        "Test abbreviation extraction"
        self.assertEqual(building_abbreviation({"name": "Student Center East (SCE)"}), "SCE")
        self.assertEqual(building_abbreviation({"name": "Library", "abbreviation": "LIB"}), "LIB")
        self.assertEqual(building_abbreviation({"name": "Library (Daley) Annex"}), "")
        self.assertEqual(building_abbreviation({}), "")

    def test_centroid(self):
        "The centroid of points is their mean"
        points = [Coordinates(0.0, 0.0), Coordinates(2.0, 0.0), Coordinates(2.0, 4.0)]
        center = centroid(points)
        self.assertAlmostEqual(center.lon, 4.0 / 3)
        self.assertAlmostEqual(center.lat, 4.0 / 3)
        self.assertIsNone(centroid([]))
