"""Built-in default location and preset cities offered for quick selection."""

import re

from skyglance.models.location import Location


def _preset(
    name: str, region: str, country: str, latitude: float, longitude: float
) -> Location:
    slug = re.sub(r"[^a-z0-9]+", "-", f"{name} {region}".lower()).strip("-")
    return Location(
        id=f"preset:{slug}",
        name=name,
        region=region,
        country=country,
        latitude=latitude,
        longitude=longitude,
    )


DEFAULT_LOCATION: Location = _preset("Toronto", "ON", "Canada", 43.6532, -79.3832)

PRESET_LOCATIONS: list[Location] = [
    # North America - United States
    _preset("New York", "NY", "United States", 40.7128, -74.0060),
    _preset("Los Angeles", "CA", "United States", 34.0522, -118.2437),
    _preset("Chicago", "IL", "United States", 41.8781, -87.6298),
    _preset("Houston", "TX", "United States", 29.7604, -95.3698),
    _preset("Phoenix", "AZ", "United States", 33.4484, -112.0740),
    _preset("Philadelphia", "PA", "United States", 39.9526, -75.1652),
    _preset("San Antonio", "TX", "United States", 29.4241, -98.4936),
    _preset("San Diego", "CA", "United States", 32.7157, -117.1611),
    _preset("Dallas", "TX", "United States", 32.7767, -96.7970),
    _preset("San Jose", "CA", "United States", 37.3382, -121.8863),
    _preset("Austin", "TX", "United States", 30.2672, -97.7431),
    _preset("Jacksonville", "FL", "United States", 30.3322, -81.6557),
    _preset("Fort Worth", "TX", "United States", 32.7555, -97.3308),
    _preset("Columbus", "OH", "United States", 39.9612, -82.9988),
    _preset("Charlotte", "NC", "United States", 35.2271, -80.8431),
    _preset("San Francisco", "CA", "United States", 37.7749, -122.4194),
    _preset("Indianapolis", "IN", "United States", 39.7684, -86.1581),
    _preset("Seattle", "WA", "United States", 47.6062, -122.3321),
    _preset("Denver", "CO", "United States", 39.7392, -104.9903),
    _preset("Washington D.C.", "DC", "United States", 38.9072, -77.0369),
    _preset("Boston", "MA", "United States", 42.3601, -71.0589),
    _preset("Nashville", "TN", "United States", 36.1627, -86.7816),
    _preset("Detroit", "MI", "United States", 42.3314, -83.0458),
    _preset("Portland", "OR", "United States", 45.5152, -122.6784),
    _preset("Las Vegas", "NV", "United States", 36.1699, -115.1398),
    _preset("Memphis", "TN", "United States", 35.1495, -90.0490),
    _preset("Louisville", "KY", "United States", 38.2527, -85.7585),
    _preset("Baltimore", "MD", "United States", 39.2904, -76.6122),
    _preset("Milwaukee", "WI", "United States", 43.0389, -87.9065),
    _preset("Albuquerque", "NM", "United States", 35.0844, -106.6504),
    _preset("Tucson", "AZ", "United States", 32.2226, -110.9747),
    _preset("Fresno", "CA", "United States", 36.7378, -119.7871),
    _preset("Sacramento", "CA", "United States", 38.5816, -121.4944),
    _preset("Atlanta", "GA", "United States", 33.7490, -84.3880),
    _preset("Miami", "FL", "United States", 25.7617, -80.1918),
    _preset("New Orleans", "LA", "United States", 29.9511, -90.0715),
    _preset("Honolulu", "HI", "United States", 21.3069, -157.8583),
    _preset("Minneapolis", "MN", "United States", 44.9778, -93.2650),
    _preset("Cleveland", "OH", "United States", 41.4993, -81.6944),
    _preset("Orlando", "FL", "United States", 28.5383, -81.3792),
    _preset("Tampa", "FL", "United States", 27.9506, -82.4572),
    _preset("Pittsburgh", "PA", "United States", 40.4406, -79.9959),
    _preset("Cincinnati", "OH", "United States", 39.1031, -84.5120),
    _preset("Raleigh", "NC", "United States", 35.7796, -78.6382),
    _preset("Salt Lake City", "UT", "United States", 40.7608, -111.8910),
    _preset("Kansas City", "MO", "United States", 39.0997, -94.5786),
    _preset("St. Louis", "MO", "United States", 38.6270, -90.1994),
    _preset("San Bernardino", "CA", "United States", 34.1083, -117.2898),
    _preset("La Quinta", "CA", "United States", 33.6634, -116.3100),
    _preset("Palm Springs", "CA", "United States", 33.8303, -116.5453),
    _preset("Santa Barbara", "CA", "United States", 34.4208, -119.6982),
    _preset("Santa Monica", "CA", "United States", 34.0195, -118.4912),
    _preset("Pasadena", "CA", "United States", 34.1478, -118.1445),
    _preset("Anaheim", "CA", "United States", 33.8366, -117.9143),
    _preset("Irvine", "CA", "United States", 33.6846, -117.8265),
    _preset("Oakland", "CA", "United States", 37.8044, -122.2712),
    _preset("Berkeley", "CA", "United States", 37.8716, -122.2727),
    _preset("Palo Alto", "CA", "United States", 37.4419, -122.1430),
    _preset("Santa Cruz", "CA", "United States", 36.9741, -122.0308),
    _preset("Monterey", "CA", "United States", 36.6002, -121.8947),
    _preset("Napa", "CA", "United States", 38.2975, -122.2869),
    _preset("Anchorage", "AK", "United States", 61.2181, -149.9003),
    _preset("Savannah", "GA", "United States", 32.0809, -81.0912),
    _preset("Charleston", "SC", "United States", 32.7765, -79.9311),
    _preset("Providence", "RI", "United States", 41.8240, -71.4128),
    _preset("Hartford", "CT", "United States", 41.7658, -72.6734),
    _preset("Buffalo", "NY", "United States", 42.8864, -78.8784),
    _preset("Rochester", "NY", "United States", 43.1566, -77.6088),
    # North America - Canada
    DEFAULT_LOCATION,
    _preset("Montreal", "QC", "Canada", 45.5017, -73.5673),
    _preset("Vancouver", "BC", "Canada", 49.2827, -123.1207),
    _preset("Calgary", "AB", "Canada", 51.0447, -114.0719),
    _preset("Edmonton", "AB", "Canada", 53.5461, -113.4938),
    _preset("Ottawa", "ON", "Canada", 45.4215, -75.6972),
    _preset("Winnipeg", "MB", "Canada", 49.8951, -97.1384),
    _preset("Quebec City", "QC", "Canada", 46.8139, -71.2080),
    _preset("Hamilton", "ON", "Canada", 43.2557, -79.8711),
    _preset("Kitchener", "ON", "Canada", 43.4516, -80.4925),
    _preset("London", "ON", "Canada", 42.9849, -81.2453),
    _preset("Victoria", "BC", "Canada", 48.4284, -123.3656),
    _preset("Halifax", "NS", "Canada", 44.6488, -63.5752),
    _preset("Saskatoon", "SK", "Canada", 52.1579, -106.6702),
    _preset("Regina", "SK", "Canada", 50.4452, -104.6189),
    _preset("St. John's", "NL", "Canada", 47.5615, -52.7126),
    _preset("Kelowna", "BC", "Canada", 49.8880, -119.4960),
    _preset("Whistler", "BC", "Canada", 50.1163, -122.9574),
    _preset("Banff", "AB", "Canada", 51.1784, -115.5708),
    # North America - Mexico & Central America
    _preset("Mexico City", "CDMX", "Mexico", 19.4326, -99.1332),
    _preset("Guadalajara", "Jalisco", "Mexico", 20.6597, -103.3496),
    _preset("Monterrey", "Nuevo León", "Mexico", 25.6866, -100.3161),
    _preset("Cancún", "Quintana Roo", "Mexico", 21.1619, -86.8515),
    _preset("Tijuana", "Baja California", "Mexico", 32.5149, -117.0382),
    _preset("Puerto Vallarta", "Jalisco", "Mexico", 20.6534, -105.2253),
    _preset("Playa del Carmen", "Quintana Roo", "Mexico", 20.6296, -87.0739),
    _preset("Cabo San Lucas", "Baja California Sur", "Mexico", 22.8905, -109.9167),
    _preset("Oaxaca", "Oaxaca", "Mexico", 17.0732, -96.7266),
    _preset("Mérida", "Yucatán", "Mexico", 20.9674, -89.5926),
    _preset("San Miguel de Allende", "Guanajuato", "Mexico", 20.9144, -100.7452),
    _preset("Guatemala City", "Guatemala", "Guatemala", 14.6349, -90.5069),
    _preset("San José", "San José", "Costa Rica", 9.9281, -84.0907),
    _preset("Panama City", "Panamá", "Panama", 8.9824, -79.5199),
    _preset("Havana", "Havana", "Cuba", 23.1136, -82.3666),
    _preset("San Juan", "PR", "Puerto Rico", 18.4655, -66.1057),
    _preset("Nassau", "New Providence", "Bahamas", 25.0480, -77.3554),
    _preset("Kingston", "Kingston", "Jamaica", 17.9714, -76.7936),
    # Europe - Western
    _preset("London", "England", "United Kingdom", 51.5074, -0.1278),
    _preset("Manchester", "England", "United Kingdom", 53.4808, -2.2426),
    _preset("Birmingham", "England", "United Kingdom", 52.4862, -1.8904),
    _preset("Edinburgh", "Scotland", "United Kingdom", 55.9533, -3.1883),
    _preset("Glasgow", "Scotland", "United Kingdom", 55.8642, -4.2518),
    _preset("Liverpool", "England", "United Kingdom", 53.4084, -2.9916),
    _preset("Bristol", "England", "United Kingdom", 51.4545, -2.5879),
    _preset("Oxford", "England", "United Kingdom", 51.7520, -1.2577),
    _preset("Cambridge", "England", "United Kingdom", 52.2053, 0.1218),
    _preset("Paris", "Île-de-France", "France", 48.8566, 2.3522),
    _preset("Lyon", "Auvergne-Rhône-Alpes", "France", 45.7640, 4.8357),
    _preset("Marseille", "Provence-Alpes-Côte d'Azur", "France", 43.2965, 5.3698),
    _preset("Nice", "Provence-Alpes-Côte d'Azur", "France", 43.7102, 7.2620),
    _preset("Bordeaux", "Nouvelle-Aquitaine", "France", 44.8378, -0.5792),
    _preset("Toulouse", "Occitanie", "France", 43.6047, 1.4442),
    _preset("Strasbourg", "Grand Est", "France", 48.5734, 7.7521),
    _preset("Amsterdam", "North Holland", "Netherlands", 52.3676, 4.9041),
    _preset("Rotterdam", "South Holland", "Netherlands", 51.9225, 4.4792),
    _preset("The Hague", "South Holland", "Netherlands", 52.0705, 4.3007),
    _preset("Brussels", "Brussels", "Belgium", 50.8503, 4.3517),
    _preset("Antwerp", "Flanders", "Belgium", 51.2194, 4.4025),
    _preset("Dublin", "Leinster", "Ireland", 53.3498, -6.2603),
    _preset("Cork", "Munster", "Ireland", 51.8985, -8.4756),
    _preset("Galway", "Connacht", "Ireland", 53.2707, -9.0568),
    # Europe - Central
    _preset("Berlin", "Berlin", "Germany", 52.5200, 13.4050),
    _preset("Munich", "Bavaria", "Germany", 48.1351, 11.5820),
    _preset("Frankfurt", "Hesse", "Germany", 50.1109, 8.6821),
    _preset("Hamburg", "Hamburg", "Germany", 53.5511, 9.9937),
    _preset("Cologne", "North Rhine-Westphalia", "Germany", 50.9375, 6.9603),
    _preset("Düsseldorf", "North Rhine-Westphalia", "Germany", 51.2277, 6.7735),
    _preset("Stuttgart", "Baden-Württemberg", "Germany", 48.7758, 9.1829),
    _preset("Vienna", "Vienna", "Austria", 48.2082, 16.3738),
    _preset("Salzburg", "Salzburg", "Austria", 47.8095, 13.0550),
    _preset("Innsbruck", "Tyrol", "Austria", 47.2692, 11.4041),
    _preset("Zurich", "Zurich", "Switzerland", 47.3769, 8.5417),
    _preset("Geneva", "Geneva", "Switzerland", 46.2044, 6.1432),
    _preset("Bern", "Bern", "Switzerland", 46.9480, 7.4474),
    _preset("Basel", "Basel-Stadt", "Switzerland", 47.5596, 7.5886),
    _preset("Prague", "Prague", "Czech Republic", 50.0755, 14.4378),
    _preset("Warsaw", "Masovian", "Poland", 52.2297, 21.0122),
    _preset("Kraków", "Lesser Poland", "Poland", 50.0647, 19.9450),
    _preset("Gdańsk", "Pomeranian", "Poland", 54.3520, 18.6466),
    _preset("Wrocław", "Lower Silesian", "Poland", 51.1079, 17.0385),
    _preset("Budapest", "Budapest", "Hungary", 47.4979, 19.0402),
    # Europe - Southern
    _preset("Rome", "Lazio", "Italy", 41.9028, 12.4964),
    _preset("Milan", "Lombardy", "Italy", 45.4642, 9.1900),
    _preset("Florence", "Tuscany", "Italy", 43.7696, 11.2558),
    _preset("Venice", "Veneto", "Italy", 45.4408, 12.3155),
    _preset("Naples", "Campania", "Italy", 40.8518, 14.2681),
    _preset("Turin", "Piedmont", "Italy", 45.0703, 7.6869),
    _preset("Bologna", "Emilia-Romagna", "Italy", 44.4949, 11.3426),
    _preset("Palermo", "Sicily", "Italy", 38.1157, 13.3615),
    _preset("Madrid", "Madrid", "Spain", 40.4168, -3.7038),
    _preset("Barcelona", "Catalonia", "Spain", 41.3851, 2.1734),
    _preset("Valencia", "Valencia", "Spain", 39.4699, -0.3763),
    _preset("Seville", "Andalusia", "Spain", 37.3891, -5.9845),
    _preset("Málaga", "Andalusia", "Spain", 36.7213, -4.4214),
    _preset("Bilbao", "Basque Country", "Spain", 43.2630, -2.9350),
    _preset("Granada", "Andalusia", "Spain", 37.1773, -3.5986),
    _preset("Ibiza", "Balearic Islands", "Spain", 38.9067, 1.4206),
    _preset("Palma de Mallorca", "Balearic Islands", "Spain", 39.5696, 2.6502),
    _preset("Lisbon", "Lisbon", "Portugal", 38.7223, -9.1393),
    _preset("Porto", "Porto", "Portugal", 41.1579, -8.6291),
    _preset("Faro", "Algarve", "Portugal", 37.0194, -7.9322),
    _preset("Athens", "Attica", "Greece", 37.9838, 23.7275),
    _preset("Thessaloniki", "Central Macedonia", "Greece", 40.6401, 22.9444),
    _preset("Santorini", "South Aegean", "Greece", 36.3932, 25.4615),
    _preset("Mykonos", "South Aegean", "Greece", 37.4467, 25.3289),
    # Europe - Nordic
    _preset("Stockholm", "Stockholm", "Sweden", 59.3293, 18.0686),
    _preset("Gothenburg", "Västra Götaland", "Sweden", 57.7089, 11.9746),
    _preset("Malmö", "Skåne", "Sweden", 55.6050, 13.0038),
    _preset("Copenhagen", "Capital Region", "Denmark", 55.6761, 12.5683),
    _preset("Oslo", "Oslo", "Norway", 59.9139, 10.7522),
    _preset("Bergen", "Vestland", "Norway", 60.3913, 5.3221),
    _preset("Tromsø", "Troms og Finnmark", "Norway", 69.6492, 18.9553),
    _preset("Helsinki", "Uusimaa", "Finland", 60.1699, 24.9384),
    _preset("Reykjavik", "Capital Region", "Iceland", 64.1466, -21.9426),
    # Europe - Eastern
    _preset("Moscow", "Moscow", "Russia", 55.7558, 37.6173),
    _preset("St. Petersburg", "Northwestern", "Russia", 59.9311, 30.3609),
    _preset("Kyiv", "Kyiv", "Ukraine", 50.4501, 30.5234),
    _preset("Bucharest", "Bucharest", "Romania", 44.4268, 26.1025),
    _preset("Sofia", "Sofia", "Bulgaria", 42.6977, 23.3219),
    _preset("Belgrade", "Belgrade", "Serbia", 44.7866, 20.4489),
    _preset("Zagreb", "Zagreb", "Croatia", 45.8150, 15.9819),
    _preset("Dubrovnik", "Dubrovnik-Neretva", "Croatia", 42.6507, 18.0944),
    _preset("Split", "Split-Dalmatia", "Croatia", 43.5081, 16.4402),
    _preset("Ljubljana", "Central Slovenia", "Slovenia", 46.0569, 14.5058),
    _preset("Bratislava", "Bratislava", "Slovakia", 48.1486, 17.1077),
    _preset("Tallinn", "Harju", "Estonia", 59.4370, 24.7536),
    _preset("Riga", "Riga", "Latvia", 56.9496, 24.1052),
    _preset("Vilnius", "Vilnius", "Lithuania", 54.6872, 25.2797),
    # Asia - East
    _preset("Tokyo", "Tokyo", "Japan", 35.6762, 139.6503),
    _preset("Osaka", "Osaka", "Japan", 34.6937, 135.5023),
    _preset("Kyoto", "Kyoto", "Japan", 35.0116, 135.7681),
    _preset("Yokohama", "Kanagawa", "Japan", 35.4437, 139.6380),
    _preset("Nagoya", "Aichi", "Japan", 35.1815, 136.9066),
    _preset("Sapporo", "Hokkaido", "Japan", 43.0618, 141.3545),
    _preset("Fukuoka", "Fukuoka", "Japan", 33.5904, 130.4017),
    _preset("Hiroshima", "Hiroshima", "Japan", 34.3853, 132.4553),
    _preset("Nara", "Nara", "Japan", 34.6851, 135.8048),
    _preset("Seoul", "Seoul", "South Korea", 37.5665, 126.9780),
    _preset("Busan", "Busan", "South Korea", 35.1796, 129.0756),
    _preset("Incheon", "Incheon", "South Korea", 37.4563, 126.7052),
    _preset("Jeju", "Jeju", "South Korea", 33.4996, 126.5312),
    _preset("Beijing", "Beijing", "China", 39.9042, 116.4074),
    _preset("Shanghai", "Shanghai", "China", 31.2304, 121.4737),
    _preset("Guangzhou", "Guangdong", "China", 23.1291, 113.2644),
    _preset("Shenzhen", "Guangdong", "China", 22.5431, 114.0579),
    _preset("Chengdu", "Sichuan", "China", 30.5728, 104.0668),
    _preset("Xi'an", "Shaanxi", "China", 34.3416, 108.9398),
    _preset("Hangzhou", "Zhejiang", "China", 30.2741, 120.1551),
    _preset("Hong Kong", "Hong Kong", "China", 22.3193, 114.1694),
    _preset("Macau", "Macau", "China", 22.1987, 113.5439),
    _preset("Taipei", "Taiwan", "Taiwan", 25.0330, 121.5654),
    _preset("Kaohsiung", "Taiwan", "Taiwan", 22.6273, 120.3014),
    _preset("Ulaanbaatar", "Ulaanbaatar", "Mongolia", 47.8864, 106.9057),
    # Asia - Southeast
    _preset("Singapore", "Singapore", "Singapore", 1.3521, 103.8198),
    _preset("Bangkok", "Bangkok", "Thailand", 13.7563, 100.5018),
    _preset("Chiang Mai", "Chiang Mai", "Thailand", 18.7883, 98.9853),
    _preset("Phuket", "Phuket", "Thailand", 7.8804, 98.3923),
    _preset("Pattaya", "Chonburi", "Thailand", 12.9236, 100.8825),
    _preset("Krabi", "Krabi", "Thailand", 8.0863, 98.9063),
    _preset("Ho Chi Minh City", "Ho Chi Minh", "Vietnam", 10.8231, 106.6297),
    _preset("Hanoi", "Hanoi", "Vietnam", 21.0278, 105.8342),
    _preset("Da Nang", "Da Nang", "Vietnam", 16.0544, 108.2022),
    _preset("Hoi An", "Quang Nam", "Vietnam", 15.8801, 108.3380),
    _preset("Nha Trang", "Khanh Hoa", "Vietnam", 12.2388, 109.1967),
    _preset("Kuala Lumpur", "KL", "Malaysia", 3.1390, 101.6869),
    _preset("Penang", "Penang", "Malaysia", 5.4141, 100.3288),
    _preset("Langkawi", "Kedah", "Malaysia", 6.3500, 99.8000),
    _preset("Jakarta", "Jakarta", "Indonesia", -6.2088, 106.8456),
    _preset("Bali", "Bali", "Indonesia", -8.3405, 115.0920),
    _preset("Yogyakarta", "Yogyakarta", "Indonesia", -7.7956, 110.3695),
    _preset("Surabaya", "East Java", "Indonesia", -7.2575, 112.7521),
    _preset("Manila", "Metro Manila", "Philippines", 14.5995, 120.9842),
    _preset("Cebu", "Central Visayas", "Philippines", 10.3157, 123.8854),
    _preset("Boracay", "Western Visayas", "Philippines", 11.9674, 121.9248),
    _preset("Palawan", "Mimaropa", "Philippines", 9.8349, 118.7384),
    _preset("Phnom Penh", "Phnom Penh", "Cambodia", 11.5564, 104.9282),
    _preset("Siem Reap", "Siem Reap", "Cambodia", 13.3633, 103.8564),
    _preset("Vientiane", "Vientiane", "Laos", 17.9757, 102.6331),
    _preset("Luang Prabang", "Luang Prabang", "Laos", 19.8849, 102.1347),
    _preset("Yangon", "Yangon", "Myanmar", 16.8661, 96.1951),
    # Asia - South
    _preset("Mumbai", "Maharashtra", "India", 19.0760, 72.8777),
    _preset("Delhi", "Delhi", "India", 28.6139, 77.2090),
    _preset("Bangalore", "Karnataka", "India", 12.9716, 77.5946),
    _preset("Chennai", "Tamil Nadu", "India", 13.0827, 80.2707),
    _preset("Kolkata", "West Bengal", "India", 22.5726, 88.3639),
    _preset("Hyderabad", "Telangana", "India", 17.3850, 78.4867),
    _preset("Jaipur", "Rajasthan", "India", 26.9124, 75.7873),
    _preset("Goa", "Goa", "India", 15.2993, 74.1240),
    _preset("Agra", "Uttar Pradesh", "India", 27.1767, 78.0081),
    _preset("Varanasi", "Uttar Pradesh", "India", 25.3176, 82.9739),
    _preset("Udaipur", "Rajasthan", "India", 24.5854, 73.7125),
    _preset("Colombo", "Western", "Sri Lanka", 6.9271, 79.8612),
    _preset("Kathmandu", "Bagmati", "Nepal", 27.7172, 85.3240),
    _preset("Dhaka", "Dhaka", "Bangladesh", 23.8103, 90.4125),
    _preset("Karachi", "Sindh", "Pakistan", 24.8607, 67.0011),
    _preset("Lahore", "Punjab", "Pakistan", 31.5204, 74.3587),
    _preset("Islamabad", "Islamabad", "Pakistan", 33.6844, 73.0479),
    _preset("Malé", "Malé", "Maldives", 4.1755, 73.5093),
    # Asia - Middle East
    _preset("Dubai", "Dubai", "UAE", 25.2048, 55.2708),
    _preset("Abu Dhabi", "Abu Dhabi", "UAE", 24.4539, 54.3773),
    _preset("Doha", "Doha", "Qatar", 25.2854, 51.5310),
    _preset("Riyadh", "Riyadh", "Saudi Arabia", 24.7136, 46.6753),
    _preset("Jeddah", "Makkah", "Saudi Arabia", 21.4858, 39.1925),
    _preset("Muscat", "Muscat", "Oman", 23.5880, 58.3829),
    _preset("Kuwait City", "Al Asimah", "Kuwait", 29.3759, 47.9774),
    _preset("Manama", "Capital", "Bahrain", 26.2285, 50.5860),
    _preset("Tel Aviv", "Tel Aviv", "Israel", 32.0853, 34.7818),
    _preset("Jerusalem", "Jerusalem", "Israel", 31.7683, 35.2137),
    _preset("Amman", "Amman", "Jordan", 31.9454, 35.9284),
    _preset("Beirut", "Beirut", "Lebanon", 33.8938, 35.5018),
    _preset("Istanbul", "Istanbul", "Turkey", 41.0082, 28.9784),
    _preset("Ankara", "Ankara", "Turkey", 39.9334, 32.8597),
    _preset("Antalya", "Antalya", "Turkey", 36.8969, 30.7133),
    _preset("Izmir", "Izmir", "Turkey", 38.4237, 27.1428),
    _preset("Cappadocia", "Nevşehir", "Turkey", 38.6431, 34.8289),
    _preset("Tehran", "Tehran", "Iran", 35.6892, 51.3890),
    # Oceania
    _preset("Sydney", "NSW", "Australia", -33.8688, 151.2093),
    _preset("Melbourne", "VIC", "Australia", -37.8136, 144.9631),
    _preset("Brisbane", "QLD", "Australia", -27.4698, 153.0251),
    _preset("Perth", "WA", "Australia", -31.9505, 115.8605),
    _preset("Adelaide", "SA", "Australia", -34.9285, 138.6007),
    _preset("Gold Coast", "QLD", "Australia", -28.0167, 153.4000),
    _preset("Cairns", "QLD", "Australia", -16.9186, 145.7781),
    _preset("Hobart", "TAS", "Australia", -42.8821, 147.3272),
    _preset("Darwin", "NT", "Australia", -12.4634, 130.8456),
    _preset("Canberra", "ACT", "Australia", -35.2809, 149.1300),
    _preset("Auckland", "Auckland", "New Zealand", -36.8485, 174.7633),
    _preset("Wellington", "Wellington", "New Zealand", -41.2865, 174.7762),
    _preset("Christchurch", "Canterbury", "New Zealand", -43.5321, 172.6362),
    _preset("Queenstown", "Otago", "New Zealand", -45.0312, 168.6626),
    _preset("Rotorua", "Bay of Plenty", "New Zealand", -38.1368, 176.2497),
    _preset("Fiji", "Suva", "Fiji", -18.1416, 178.4419),
    _preset("Tahiti", "Windward Islands", "French Polynesia", -17.6509, -149.4260),
    _preset("Bora Bora", "Leeward Islands", "French Polynesia", -16.5004, -151.7415),
    # South America
    _preset("São Paulo", "SP", "Brazil", -23.5505, -46.6333),
    _preset("Rio de Janeiro", "RJ", "Brazil", -22.9068, -43.1729),
    _preset("Brasília", "DF", "Brazil", -15.7975, -47.8919),
    _preset("Salvador", "BA", "Brazil", -12.9714, -38.5014),
    _preset("Fortaleza", "CE", "Brazil", -3.7172, -38.5433),
    _preset("Recife", "PE", "Brazil", -8.0476, -34.8770),
    _preset("Florianópolis", "SC", "Brazil", -27.5954, -48.5480),
    _preset("Buenos Aires", "BA", "Argentina", -34.6037, -58.3816),
    _preset("Mendoza", "Mendoza", "Argentina", -32.8895, -68.8458),
    _preset("Córdoba", "Córdoba", "Argentina", -31.4201, -64.1888),
    _preset("Bariloche", "Río Negro", "Argentina", -41.1335, -71.3103),
    _preset("Santiago", "Santiago", "Chile", -33.4489, -70.6693),
    _preset("Valparaíso", "Valparaíso", "Chile", -33.0472, -71.6127),
    _preset("Lima", "Lima", "Peru", -12.0464, -77.0428),
    _preset("Cusco", "Cusco", "Peru", -13.5319, -71.9675),
    _preset("Machu Picchu", "Cusco", "Peru", -13.1631, -72.5450),
    _preset("Bogotá", "Bogotá", "Colombia", 4.7110, -74.0721),
    _preset("Medellín", "Antioquia", "Colombia", 6.2442, -75.5812),
    _preset("Cartagena", "Bolívar", "Colombia", 10.3910, -75.4794),
    _preset("Quito", "Pichincha", "Ecuador", -0.1807, -78.4678),
    _preset("Galápagos Islands", "Galápagos", "Ecuador", -0.9538, -90.9656),
    _preset("Guayaquil", "Guayas", "Ecuador", -2.1894, -79.8891),
    _preset("Montevideo", "Montevideo", "Uruguay", -34.9011, -56.1645),
    _preset("Punta del Este", "Maldonado", "Uruguay", -34.9667, -54.9500),
    _preset("Caracas", "Capital District", "Venezuela", 10.4806, -66.9036),
    _preset("La Paz", "La Paz", "Bolivia", -16.4897, -68.1193),
    _preset("Asunción", "Asunción", "Paraguay", -25.2637, -57.5759),
    # Africa
    _preset("Cairo", "Cairo", "Egypt", 30.0444, 31.2357),
    _preset("Alexandria", "Alexandria", "Egypt", 31.2001, 29.9187),
    _preset("Luxor", "Luxor", "Egypt", 25.6872, 32.6396),
    _preset("Sharm El Sheikh", "South Sinai", "Egypt", 27.9158, 34.3300),
    _preset("Marrakech", "Marrakech-Safi", "Morocco", 31.6295, -7.9811),
    _preset("Casablanca", "Casablanca-Settat", "Morocco", 33.5731, -7.5898),
    _preset("Fes", "Fès-Meknès", "Morocco", 34.0181, -5.0078),
    _preset("Tangier", "Tanger-Tetouan-Al Hoceima", "Morocco", 35.7595, -5.8340),
    _preset("Tunis", "Tunis", "Tunisia", 36.8065, 10.1815),
    _preset("Cape Town", "Western Cape", "South Africa", -33.9249, 18.4241),
    _preset("Johannesburg", "Gauteng", "South Africa", -26.2041, 28.0473),
    _preset("Durban", "KwaZulu-Natal", "South Africa", -29.8587, 31.0218),
    _preset("Pretoria", "Gauteng", "South Africa", -25.7479, 28.2293),
    _preset("Kruger National Park", "Limpopo", "South Africa", -23.9884, 31.5547),
    _preset("Nairobi", "Nairobi", "Kenya", -1.2921, 36.8219),
    _preset("Mombasa", "Coast", "Kenya", -4.0435, 39.6682),
    _preset("Maasai Mara", "Narok", "Kenya", -1.4061, 35.0172),
    _preset("Zanzibar", "Zanzibar", "Tanzania", -6.1659, 39.2026),
    _preset("Dar es Salaam", "Dar es Salaam", "Tanzania", -6.7924, 39.2083),
    _preset("Serengeti", "Mara", "Tanzania", -2.3333, 34.8333),
    _preset("Lagos", "Lagos", "Nigeria", 6.5244, 3.3792),
    _preset("Abuja", "FCT", "Nigeria", 9.0765, 7.3986),
    _preset("Accra", "Greater Accra", "Ghana", 5.6037, -0.1870),
    _preset("Addis Ababa", "Addis Ababa", "Ethiopia", 9.0320, 38.7469),
    _preset("Dakar", "Dakar", "Senegal", 14.7167, -17.4677),
    _preset("Victoria Falls", "Matabeleland North", "Zimbabwe", -17.9243, 25.8572),
    _preset("Mauritius", "Port Louis", "Mauritius", -20.1609, 57.5012),
    _preset("Seychelles", "Mahé", "Seychelles", -4.6796, 55.4920),
]


def find_presets(query: str) -> list[Location]:
    """Case-insensitive match against preset name, region or country."""
    q = query.strip().lower()
    if not q:
        return list(PRESET_LOCATIONS)
    return [
        loc
        for loc in PRESET_LOCATIONS
        if q in loc.name.lower() or q in loc.region.lower() or q in loc.country.lower()
    ]
