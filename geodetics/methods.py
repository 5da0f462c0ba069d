"""
EPSG coordinate operation parameters and the projection methods implemented by geodetics
"""

__all__ = [
    'EQUIDISTANT_CYLINDRICAL', 'FALSE_EASTING', 'FALSE_NORTHING',
    'LATITUDE_OF_1ST_STANDARD_PARALLEL', 'LATITUDE_OF_NATURAL_ORIGIN',
    'LONGITUDE_OF_NATURAL_ORIGIN', 'MERCATOR_A', 'SCALE_FACTOR_AT_NATURAL_ORIGIN',
]

from geodetics.operations import CoordinateOperationMethod, CoordinateOperationParameter

# Parameters
LATITUDE_OF_NATURAL_ORIGIN = CoordinateOperationParameter(
    'EPSG::8801', 'Latitude of natural origin',
    'The latitude of the point which, in the absence of false coordinates, '
    'has grid coordinates (0, 0).',
    aliases=['Latitude of origin'],
)
LONGITUDE_OF_NATURAL_ORIGIN = CoordinateOperationParameter(
    'EPSG::8802', 'Longitude of natural origin',
    'The longitude of the point which, in the absence of false coordinates, '
    'has grid coordinates (0, 0). Sometimes known as the central meridian.',
    aliases=['Central Meridian', 'CM'],
)
SCALE_FACTOR_AT_NATURAL_ORIGIN = CoordinateOperationParameter(
    'EPSG::8805', 'Scale factor at natural origin',
    'The factor by which the map grid is reduced or enlarged, defined by its '
    'value at the natural origin.',
)
FALSE_EASTING = CoordinateOperationParameter(
    'EPSG::8806', 'False easting',
    'The value assigned to the abscissa (east or west) axis of the projection '
    'grid at the natural origin.',
)
FALSE_NORTHING = CoordinateOperationParameter(
    'EPSG::8807', 'False northing',
    'The value assigned to the ordinate (north or south) axis of the projection '
    'grid at the natural origin.',
)
LATITUDE_OF_1ST_STANDARD_PARALLEL = CoordinateOperationParameter(
    'EPSG::8823', 'Latitude of 1st standard parallel',
    'The latitude of a parallel along which the scale is true.',
)

# Methods
EQUIDISTANT_CYLINDRICAL = CoordinateOperationMethod(
    'EPSG::1028', 'Equidistant Cylindrical', True,
    LATITUDE_OF_1ST_STANDARD_PARALLEL,
    LONGITUDE_OF_NATURAL_ORIGIN,
    FALSE_EASTING,
    FALSE_NORTHING,
)
MERCATOR_A = CoordinateOperationMethod(
    'EPSG::9804', 'Mercator (variant A)', True,
    LATITUDE_OF_NATURAL_ORIGIN,
    LONGITUDE_OF_NATURAL_ORIGIN,
    SCALE_FACTOR_AT_NATURAL_ORIGIN,
    FALSE_EASTING,
    FALSE_NORTHING,
)
