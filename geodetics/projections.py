"""
Map projections
"""

__all__ = ['EquidistantCylindricalProjection', 'MercatorAProjection']

import math
from typing import Any, Iterable, Mapping, Optional

import numpy as np

from geodetics._const import COMPUTATION_TOLERANCE, PROJECTION_INTEGRATION_INTERVALS
from geodetics.coordinates import GeoCoordinate, ProjectedCoordinate
from geodetics.ellipsoid import Ellipsoid
from geodetics.methods import (
    EQUIDISTANT_CYLINDRICAL, FALSE_EASTING, FALSE_NORTHING,
    LATITUDE_OF_1ST_STANDARD_PARALLEL, LONGITUDE_OF_NATURAL_ORIGIN, MERCATOR_A,
    SCALE_FACTOR_AT_NATURAL_ORIGIN,
)
from geodetics.operations import CoordinateOperationParameter, CoordinateProjection
from geodetics.quantities import Angle, Length
from geodetics.utils.functions import normalize_angle
from geodetics.utils.integral import simpsons_method


def _sine_series(coefficients: np.ndarray, angle: float) -> float:
    """Evaluates sum(c_k * sin(2k * angle)) for k = 1..len(coefficients)"""
    multiples = 2 * np.arange(1, len(coefficients) + 1)
    return float(np.dot(coefficients, np.sin(multiples * angle)))


class EquidistantCylindricalProjection(CoordinateProjection):
    """
    Equidistant Cylindrical projection (EPSG::1028), also known as Plate
    Carrée when the standard parallel is the equator.

    Meridians are mapped to equally spaced vertical lines and distances along
    meridians are preserved. On an ellipsoid the northing is the meridian arc
    length from the equator, integrated numerically.

    Args:
        identifier:
            The authority identifier of the projection

        name:
            The projection name

        parameters:
            A mapping of the EQUIDISTANT_CYLINDRICAL method parameters to values

        ellipsoid:
            The reference ellipsoid
    """

    def __init__(
        self,
        identifier: str,
        name: str,
        parameters: Optional[Mapping[CoordinateOperationParameter, Any]],
        ellipsoid: Ellipsoid,
        area_of_use: Optional[Any] = None,
        remarks: Optional[str] = None,
        aliases: Optional[Iterable[str]] = None,
    ):
        super().__init__(
            identifier, name, EQUIDISTANT_CYLINDRICAL, parameters, ellipsoid,
            area_of_use, remarks, aliases
        )
        self._latitude_of_1st_standard_parallel = self.get_parameter_base_value(
            LATITUDE_OF_1ST_STANDARD_PARALLEL
        )
        self._longitude_of_natural_origin = self.get_parameter_base_value(
            LONGITUDE_OF_NATURAL_ORIGIN
        )
        self._false_easting = self.get_parameter_value(FALSE_EASTING)
        self._false_northing = self.get_parameter_value(FALSE_NORTHING)
        self._nu1 = ellipsoid.radius_of_prime_vertical_curvature(
            self._latitude_of_1st_standard_parallel
        )

        e = ellipsoid.eccentricity
        # Rectifying radius factor, and the footpoint latitude series in n
        self._mu_divisor = ellipsoid.semi_major_axis.value * (
            1 - e ** 2 / 4 - 3 * e ** 4 / 64 - 5 * e ** 6 / 256 - 175 * e ** 8 / 16384
            - 441 * e ** 10 / 65536 - 4851 * e ** 12 / 1048576 - 14157 * e ** 14 / 4194304
        )
        n = (1 - math.sqrt(1 - e ** 2)) / (1 + math.sqrt(1 - e ** 2))
        self._footpoint_coefficients = np.array([
            3 * n / 2 - 27 * n ** 3 / 32 + 269 * n ** 5 / 512 - 6607 * n ** 7 / 24576,
            21 * n ** 2 / 16 - 55 * n ** 4 / 32 + 6759 * n ** 6 / 4096,
            151 * n ** 3 / 96 - 417 * n ** 5 / 128 + 87963 * n ** 7 / 20480,
            1097 * n ** 4 / 512 - 15543 * n ** 6 / 2560,
            8011 * n ** 5 / 2560 - 69119 * n ** 7 / 6144,
            293393 * n ** 6 / 61440,
            6845701 * n ** 7 / 860160,
        ])

    def _compute_forward(self, coordinate: GeoCoordinate) -> ProjectedCoordinate:
        if not coordinate.is_valid:
            return ProjectedCoordinate.UNDEFINED

        phi = coordinate.latitude.to_radian()
        d_lambda = coordinate.longitude.to_radian() - self._longitude_of_natural_origin
        a = self._ellipsoid.semi_major_axis.value

        if self._ellipsoid.is_sphere:
            easting = self._false_easting + a * d_lambda * math.cos(self._latitude_of_1st_standard_parallel)
            northing = self._false_northing + a * phi
        else:
            meridian_arc = simpsons_method(
                self._ellipsoid.radius_of_meridian_curvature, 0., phi,
                PROJECTION_INTEGRATION_INTERVALS
            )
            easting = self._false_easting + self._nu1 * math.cos(self._latitude_of_1st_standard_parallel) * d_lambda
            northing = self._false_northing + meridian_arc

        unit = self._ellipsoid.unit
        return ProjectedCoordinate(
            Length(easting, unit), Length(northing, unit), coordinate.height
        )

    def _compute_reverse(self, coordinate: ProjectedCoordinate) -> GeoCoordinate:
        if not coordinate.is_valid:
            return GeoCoordinate.UNDEFINED

        unit = self._ellipsoid.unit
        x = coordinate.x.get_value(unit) - self._false_easting
        y = coordinate.y.get_value(unit) - self._false_northing
        cos_phi1 = math.cos(self._latitude_of_1st_standard_parallel)

        if self._ellipsoid.is_sphere:
            a = self._ellipsoid.semi_major_axis.value
            phi = y / a
            lam = self._longitude_of_natural_origin + x / (a * cos_phi1)
        else:
            mu = y / self._mu_divisor
            phi = mu + _sine_series(self._footpoint_coefficients, mu)
            lam = self._longitude_of_natural_origin + x / (self._nu1 * cos_phi1)

        return GeoCoordinate(
            Angle.from_radian(phi),
            Angle.from_radian(normalize_angle(lam, start=-math.pi)),
            coordinate.z,
        )


class MercatorAProjection(CoordinateProjection):
    """
    Mercator (variant A) projection (EPSG::9804): the normal-aspect conformal
    cylindrical projection, defined by a scale factor at the equator.

    The poles project to infinity; projecting a pole yields
    ProjectedCoordinate.UNDEFINED. If no scale factor is given, 1 is used.

    Args:
        identifier:
            The authority identifier of the projection

        name:
            The projection name

        parameters:
            A mapping of the MERCATOR_A method parameters to values

        ellipsoid:
            The reference ellipsoid
    """

    def __init__(
        self,
        identifier: str,
        name: str,
        parameters: Optional[Mapping[CoordinateOperationParameter, Any]],
        ellipsoid: Ellipsoid,
        area_of_use: Optional[Any] = None,
        remarks: Optional[str] = None,
        aliases: Optional[Iterable[str]] = None,
    ):
        super().__init__(
            identifier, name, MERCATOR_A, parameters, ellipsoid,
            area_of_use, remarks, aliases
        )
        self._longitude_of_natural_origin = self.get_parameter_base_value(
            LONGITUDE_OF_NATURAL_ORIGIN
        )
        self._false_easting = self.get_parameter_value(FALSE_EASTING)
        self._false_northing = self.get_parameter_value(FALSE_NORTHING)
        if SCALE_FACTOR_AT_NATURAL_ORIGIN in self.parameters:
            self._scale_factor = self.get_parameter_value(SCALE_FACTOR_AT_NATURAL_ORIGIN)
        else:
            self._scale_factor = 1.

        e2 = ellipsoid.eccentricity_squared
        # Conformal latitude to geodetic latitude series in e^2
        self._inverse_coefficients = np.array([
            e2 / 2 + 5 * e2 ** 2 / 24 + e2 ** 3 / 12 + 13 * e2 ** 4 / 360,
            7 * e2 ** 2 / 48 + 29 * e2 ** 3 / 240 + 811 * e2 ** 4 / 11520,
            7 * e2 ** 3 / 120 + 81 * e2 ** 4 / 1120,
            4279 * e2 ** 4 / 161280,
        ])

    @property
    def scale_factor(self) -> float:
        return self._scale_factor

    def _compute_forward(self, coordinate: GeoCoordinate) -> ProjectedCoordinate:
        if not coordinate.is_valid:
            return ProjectedCoordinate.UNDEFINED

        phi = coordinate.latitude.to_radian()
        if math.cos(phi) <= COMPUTATION_TOLERANCE:
            self.warn_once(
                'The Mercator projection is undefined at the poles; '
                'returning an undefined coordinate.'
            )
            return ProjectedCoordinate.UNDEFINED

        ak0 = self._ellipsoid.semi_major_axis.value * self._scale_factor
        d_lambda = coordinate.longitude.to_radian() - self._longitude_of_natural_origin
        isometric = math.log(math.tan(math.pi / 4 + phi / 2))

        if not self._ellipsoid.is_sphere:
            e = self._ellipsoid.eccentricity
            isometric += e / 2 * math.log((1 - e * math.sin(phi)) / (1 + e * math.sin(phi)))

        unit = self._ellipsoid.unit
        return ProjectedCoordinate(
            Length(self._false_easting + ak0 * d_lambda, unit),
            Length(self._false_northing + ak0 * isometric, unit),
            coordinate.height,
        )

    def _compute_reverse(self, coordinate: ProjectedCoordinate) -> GeoCoordinate:
        if not coordinate.is_valid:
            return GeoCoordinate.UNDEFINED

        unit = self._ellipsoid.unit
        ak0 = self._ellipsoid.semi_major_axis.value * self._scale_factor
        x = coordinate.x.get_value(unit) - self._false_easting
        y = coordinate.y.get_value(unit) - self._false_northing

        chi = math.pi / 2 - 2 * math.atan(math.exp(-y / ak0))
        if self._ellipsoid.is_sphere:
            phi = chi
        else:
            phi = chi + _sine_series(self._inverse_coefficients, chi)

        lam = self._longitude_of_natural_origin + x / ak0
        return GeoCoordinate(
            Angle.from_radian(phi),
            Angle.from_radian(normalize_angle(lam, start=-math.pi)),
            coordinate.z,
        )
