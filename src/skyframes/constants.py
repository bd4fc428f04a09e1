"""
The `constants` module defines the mathematical and astronomical constants used by the frame catalog.
"""

from jax.numpy import pi as PI

# Mathematical Constants
"""
Constant to convert degrees to radians. Equal to 2pi/360. Units: *rad/deg*
"""
DEG2RAD = 2.0 * PI / 360.0

"""
Constant to convert radians to degrees. Equal to 360/2pi. Units: *deg/rad*
"""
RAD2DEG = 360.0 / (PI * 2.0)

"""
Constant to convert arcseconds to radians. Equal to 2pi/(360*3600). Units: *rad/as*
"""
AS2RAD = 2.0 * PI / 360.0 / 3600.0

"""
Full turn. Units: *rad*
"""
TWO_PI = 2.0 * PI

# Time Constants

"""
Julian Date of the J2000.0 epoch (2000-01-01 12:00:00 TT). Units: *days*
"""
JD2000 = 2451545.0

"""
Days in a Julian century. Units: *days*
"""
DAYS_PER_JULIAN_CENTURY = 36525.0

"""
Seconds in a day. Units: *s*
"""
SECONDS_PER_DAY = 86400.0

"""
Seconds of time per degree of sidereal rotation. Units: *s/deg*
"""
SIDEREAL_SECONDS_PER_DEGREE = 240.0

# Astronomical Constants

"""
Mean obliquity of the ecliptic at J2000, IAU 2006 value. Units: *arcseconds*

References:

1. N. Capitaine, P. Wallace, and J. Chapront, *Expressions for IAU 2000 precession quantities*, 2003
"""
OBLIQUITY_J2000 = 84381.406

"""
Rotation matrix from the ICRS (Equatorial RA-Dec, J2000) to Galactic
coordinates, row-major. Units: *dimensionless*

References:

1. ESA, *The Hipparcos and Tycho Catalogues*, ESA SP-1200, 1997, vol. 1, sec. 1.5.3
"""
ICRS_TO_GALACTIC = (
    (-0.0548755604162154, -0.8734370902348850, -0.4838350155487132),
    (+0.4941094278755837, -0.4448296299600112, +0.7469822444972189),
    (-0.8676661490190047, -0.1980763734312015, +0.4559837761750669),
)
