# SPDX-License-Identifier: Apache-2.0
"""Static coordinate tables used by the location resolver.

Country entries point at the capital city. Insertion order matters: the
resolver's substring tier walks ``COUNTRY_COORDS`` in order and the first
match wins.
"""

from __future__ import annotations

# (lat, lng) pairs; wrapped into ``Coordinate`` by the resolver.
COUNTRY_COORDS: dict[str, tuple[float, float]] = {
    # North America
    "United States of America": (38.9072, -77.0369),
    "United States": (38.9072, -77.0369),
    "USA": (38.9072, -77.0369),
    "US": (38.9072, -77.0369),
    "Canada": (45.4215, -75.6972),
    "Mexico": (19.4326, -99.1332),
    # South America
    "Brazil": (-15.8267, -47.9218),
    "Argentina": (-34.6037, -58.3816),
    "Chile": (-33.4489, -70.6693),
    "Colombia": (4.7110, -74.0721),
    "Peru": (-12.0464, -77.0428),
    "Venezuela": (10.4806, -66.9036),
    "Uruguay": (-34.9011, -56.1645),
    "Ecuador": (-0.1807, -78.4678),
    # Europe
    "France": (48.8566, 2.3522),
    "Germany": (52.5200, 13.4050),
    "Spain": (40.4168, -3.7038),
    "Italy": (41.9028, 12.4964),
    "United Kingdom": (51.5074, -0.1278),
    "UK": (51.5074, -0.1278),
    "Netherlands": (52.3676, 4.9041),
    "Belgium": (50.8503, 4.3517),
    "Switzerland": (46.9480, 7.4474),
    "Austria": (48.2082, 16.3738),
    "Sweden": (59.3293, 18.0686),
    "Norway": (59.9139, 10.7522),
    "Denmark": (55.6761, 12.5683),
    "Finland": (60.1695, 24.9354),
    "Poland": (52.2297, 21.0122),
    "Czech Republic": (50.0755, 14.4378),
    "Hungary": (47.4979, 19.0402),
    "Romania": (44.4268, 26.1025),
    "Greece": (37.9838, 23.7275),
    "Portugal": (38.7223, -9.1393),
    "Ireland": (53.3498, -6.2603),
    "Russia": (55.7558, 37.6173),
    "Ukraine": (50.4501, 30.5234),
    "Turkey": (39.9334, 32.8597),
    # Asia
    "Japan": (35.6762, 139.6503),
    "China": (39.9042, 116.4074),
    "India": (28.6139, 77.2090),
    "South Korea": (37.5665, 126.9780),
    "Thailand": (13.7563, 100.5018),
    "Vietnam": (21.0285, 105.8542),
    "Philippines": (14.5995, 120.9842),
    "Indonesia": (-6.2088, 106.8456),
    "Malaysia": (3.1390, 101.6869),
    "Singapore": (1.3521, 103.8198),
    "Taiwan": (25.0330, 121.5654),
    "Israel": (32.0853, 34.7818),
    "United Arab Emirates": (24.4539, 54.3773),
    "Saudi Arabia": (24.7136, 46.6753),
    # Africa
    "South Africa": (-25.7479, 28.2293),
    "Egypt": (30.0444, 31.2357),
    "Morocco": (33.9716, -6.8498),
    "Kenya": (-1.2864, 36.8172),
    "Nigeria": (9.0765, 7.3986),
    # Oceania
    "Australia": (-35.2809, 149.1300),
    "New Zealand": (-41.2865, 174.7762),
}

CITY_COORDS: dict[str, tuple[float, float]] = {
    # USA
    "New York": (40.7128, -74.0060),
    "Los Angeles": (34.0522, -118.2437),
    "Chicago": (41.8781, -87.6298),
    "San Francisco": (37.7749, -122.4194),
    "Seattle": (47.6062, -122.3321),
    "Denver": (39.7392, -104.9903),
    "Austin": (30.2672, -97.7431),
    "Portland": (45.5152, -122.6784),
    "Boston": (42.3601, -71.0589),
    "Miami": (25.7617, -80.1918),
    # Canada
    "Toronto": (43.6532, -79.3832),
    "Vancouver": (49.2827, -123.1207),
    "Montreal": (45.5017, -73.5673),
    # Europe
    "London": (51.5074, -0.1278),
    "Paris": (48.8566, 2.3522),
    "Berlin": (52.5200, 13.4050),
    "Amsterdam": (52.3676, 4.9041),
    "Barcelona": (41.3851, 2.1734),
    "Madrid": (40.4168, -3.7038),
    "Rome": (41.9028, 12.4964),
    "Vienna": (48.2082, 16.3738),
    # Asia
    "Tokyo": (35.6762, 139.6503),
    "Beijing": (39.9042, 116.4074),
    "Shanghai": (31.2304, 121.4737),
    "Hong Kong": (22.3193, 114.1694),
    "Singapore": (1.3521, 103.8198),
    "Bangkok": (13.7563, 100.5018),
    "Mumbai": (19.0760, 72.8777),
    "Delhi": (28.7041, 77.1025),
    # Australia
    "Sydney": (-33.8688, 151.2093),
    "Melbourne": (-37.8136, 144.9631),
}

# Reference point for locations that match neither table.
FALLBACK_COUNTRY = "United States"

# Short codes seen in producer data, expanded to the ADMIN names used by the
# Natural Earth country polygons.
COUNTRY_CODES: dict[str, str] = {
    "FR": "France",
    "DE": "Germany",
    "ES": "Spain",
    "IT": "Italy",
    "UK": "United Kingdom",
    "GB": "United Kingdom",
    "US": "United States of America",
    "USA": "United States of America",
    "CA": "Canada",
    "BR": "Brazil",
    "MX": "Mexico",
    "AR": "Argentina",
    "CL": "Chile",
    "CO": "Colombia",
    "PE": "Peru",
    "VE": "Venezuela",
    "NL": "Netherlands",
    "BE": "Belgium",
    "CH": "Switzerland",
    "AT": "Austria",
    "SE": "Sweden",
    "NO": "Norway",
    "DK": "Denmark",
    "FI": "Finland",
    "PL": "Poland",
    "CZ": "Czech Republic",
    "HU": "Hungary",
    "RO": "Romania",
    "GR": "Greece",
    "PT": "Portugal",
    "IE": "Ireland",
    "JP": "Japan",
    "CN": "China",
    "IN": "India",
    "AU": "Australia",
    "NZ": "New Zealand",
    "ZA": "South Africa",
    "EG": "Egypt",
    "MA": "Morocco",
    "KE": "Kenya",
    "NG": "Nigeria",
    "TH": "Thailand",
    "VN": "Vietnam",
    "PH": "Philippines",
    "ID": "Indonesia",
    "MY": "Malaysia",
    "SG": "Singapore",
    "KR": "South Korea",
    "TW": "Taiwan",
    "IL": "Israel",
    "AE": "United Arab Emirates",
    "SA": "Saudi Arabia",
    "TR": "Turkey",
    "RU": "Russia",
    "UA": "Ukraine",
}
