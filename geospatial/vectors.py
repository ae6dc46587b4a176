# (geohash, lat, lon, epsilon) checked against geohash.org
KNOWN_VECTORS = [
    ("ezs42", 42.6, -5.6, 0.01),
    ("mh7w", -20, 50, 0.1),
    ("t3b9m", 10.1, 57.2, 0.1),
    ("c2b25ps", 49.26, -123.26, 0.01),
    ("80021bgm", 0.005, -179.567, 0.001),
    ("k484ht99h2", -30.55555, 0.2, 0.00001),
    ("8buh2w4pnt", 5.00001, -140.6, 0.00001),
]
