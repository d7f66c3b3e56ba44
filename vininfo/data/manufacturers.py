from __future__ import annotations

# two-character keys are fallbacks for WMIs without a full entry
MANUFACTURERS: dict[str, str] = {
    # europe
    "WBA": "BMW",
    "WBS": "BMW M",
    "WBY": "BMW i",
    "WMW": "MINI",
    "WDB": "Mercedes-Benz",
    "WDC": "Mercedes-Benz",
    "WDD": "Mercedes-Benz",
    "W1K": "Mercedes-Benz",
    "WAU": "Audi",
    "WUA": "Audi Sport",
    "WVW": "Volkswagen",
    "WVG": "Volkswagen",
    "WV1": "Volkswagen Commercial Vehicles",
    "WV2": "Volkswagen Commercial Vehicles",
    "WP0": "Porsche",
    "WP1": "Porsche SUV",
    "W0L": "Opel",
    "WF0": "Ford Germany",
    "VF1": "Renault",
    "VF3": "Peugeot",
    "VF7": "Citroen",
    "VSS": "SEAT",
    "TMB": "Skoda",
    "TRU": "Audi Hungary",
    "YV1": "Volvo",
    "YS3": "Saab",
    "ZFA": "Fiat",
    "ZFF": "Ferrari",
    "ZAR": "Alfa Romeo",
    "ZHW": "Lamborghini",
    "ZAM": "Maserati",
    "SAJ": "Jaguar",
    "SAL": "Land Rover",
    "SCC": "Lotus",
    "SCF": "Aston Martin",
    "SCB": "Bentley",
    "SCA": "Rolls-Royce",
    "XTA": "Lada",
    # asia
    "JHM": "Honda",
    "JH4": "Acura",
    "JTD": "Toyota",
    "JTE": "Toyota",
    "JTM": "Toyota",
    "JTH": "Lexus",
    "JTJ": "Lexus",
    "JN1": "Nissan",
    "JN8": "Nissan",
    "JNK": "Infiniti",
    "JF1": "Subaru",
    "JF2": "Subaru",
    "JM1": "Mazda",
    "JA3": "Mitsubishi",
    "JS1": "Suzuki",
    "KMH": "Hyundai",
    "KM8": "Hyundai",
    "KNA": "Kia",
    "KND": "Kia",
    "KMT": "Genesis",
    "LFV": "FAW-Volkswagen",
    "LSV": "SAIC Volkswagen",
    "LRW": "Tesla China",
    "MA1": "Mahindra",
    "MAT": "Tata",
    "MAL": "Hyundai India",
    # north america
    "1FA": "Ford",
    "1FM": "Ford",
    "1FT": "Ford",
    "1G1": "Chevrolet",
    "1GC": "Chevrolet",
    "1GT": "GMC",
    "1G4": "Buick",
    "1G6": "Cadillac",
    "1C3": "Chrysler",
    "1C4": "Jeep",
    "1C6": "Ram",
    "1J4": "Jeep",
    "1HG": "Honda",
    "1N4": "Nissan",
    "1VW": "Volkswagen",
    "19U": "Acura",
    "2HG": "Honda",
    "2T1": "Toyota",
    "3FA": "Ford",
    "3VW": "Volkswagen",
    "4T1": "Toyota",
    "4S3": "Subaru",
    "5YJ": "Tesla",
    "5UX": "BMW",
    "5N1": "Nissan",
    "5NP": "Hyundai",
    "7SA": "Tesla",
    # oceania and south america
    "6FP": "Ford Australia",
    "6G1": "Holden",
    "6T1": "Toyota Australia",
    "8AP": "Fiat Argentina",
    "9BW": "Volkswagen Brazil",
    "9BG": "Chevrolet Brazil",
    # prefix fallbacks
    "1G": "General Motors",
    "2G": "General Motors Canada",
    "3G": "General Motors Mexico",
    "1F": "Ford",
    "2F": "Ford Canada",
    "1C": "Chrysler",
    "2C": "Chrysler Canada",
    "JT": "Toyota",
    "JN": "Nissan",
    "JH": "Honda",
    "KM": "Hyundai",
    "KN": "Kia",
    "WD": "Mercedes-Benz",
    "WV": "Volkswagen",
    "VF": "Renault Group",
    "YV": "Volvo",
    "ZF": "Fiat",
}
