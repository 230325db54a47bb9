IMAGE_BASE = "https://images.unsplash.com/"
IMAGE_PARAMS = "?ixlib=rb-4.0.3&auto=format&fit=crop&w=300&h=200"


def image(photo):
    return IMAGE_BASE + photo + IMAGE_PARAMS


CPU_PRODUCTS = [
    {
        "name": "Intel Core Ultra 7 265KF (up to 5.5GHz, 20 cores 20 threads, 30MB cache, 125W)",
        "category": "cpu",
        "brand": "Intel",
        "price": 7350000,
        "image": image("photo-1555617981-dac3880eac6e"),
        "description": "New generation Intel CPU, 20 cores 20 threads, boost clock up to 5.5GHz",
        "specs": {"cores": "20", "threads": "20", "baseFreq": "3.8GHz", "boostFreq": "5.5GHz", "cache": "30MB", "tdp": "125W"},
        "socket": "lga1700",
        "wattage": 125,
    },
    {
        "name": "Intel Core i7 14700K (up to 5.6GHz, 20 cores 28 threads, 33MB cache, 125W)",
        "category": "cpu",
        "brand": "Intel",
        "price": 8490000,
        "image": image("photo-1591488320449-011701bb6704"),
        "specs": {"cores": "20", "threads": "28", "baseFreq": "3.4GHz", "boostFreq": "5.6GHz", "cache": "33MB", "tdp": "125W"},
        "socket": "lga1700",
        "wattage": 125,
    },
    {
        "name": "Intel Core i5 13600K (up to 5.1GHz, 14 cores 20 threads, 24MB cache, 125W)",
        "category": "cpu",
        "brand": "Intel",
        "price": 6450000,
        "image": image("photo-1558618666-fcd25c85cd64"),
        "specs": {"cores": "14", "threads": "20", "baseFreq": "3.5GHz", "boostFreq": "5.1GHz", "cache": "24MB", "tdp": "125W"},
        "socket": "lga1700",
        "wattage": 125,
    },
    {
        "name": "AMD Ryzen 7 7700X (up to 5.4GHz, 8 cores 16 threads, 32MB cache, 105W)",
        "category": "cpu",
        "brand": "AMD",
        "price": 7890000,
        "image": image("photo-1587202372775-e229f172b9d7"),
        "specs": {"cores": "8", "threads": "16", "baseFreq": "4.5GHz", "boostFreq": "5.4GHz", "cache": "32MB", "tdp": "105W"},
        "socket": "am5",
        "wattage": 105,
    },
    {
        "name": "Intel Core i9 14900K (up to 6.0GHz, 24 cores 32 threads, 36MB cache, 125W)",
        "category": "cpu",
        "brand": "Intel",
        "price": 12990000,
        "image": image("photo-1558618666-fcd25c85cd64"),
        "specs": {"cores": "24", "threads": "32", "baseFreq": "3.2GHz", "boostFreq": "6.0GHz", "cache": "36MB", "tdp": "125W"},
        "socket": "lga1700",
        "wattage": 125,
    },
    {
        "name": "AMD Ryzen 9 7900X (up to 5.6GHz, 12 cores 24 threads, 64MB cache, 170W)",
        "category": "cpu",
        "brand": "AMD",
        "price": 11450000,
        "image": image("photo-1595617795501-9661aafda72a"),
        "specs": {"cores": "12", "threads": "24", "baseFreq": "4.7GHz", "boostFreq": "5.6GHz", "cache": "64MB", "tdp": "170W"},
        "socket": "am5",
        "wattage": 170,
    },
]

VGA_PRODUCTS = [
    {
        "name": "NVIDIA GeForce RTX 4070 (12GB GDDR6X, 2610MHz)",
        "category": "vga",
        "brand": "NVIDIA",
        "price": 15900000,
        "image": image("photo-1591488320449-011701bb6704"),
        "specs": {"memory": "12GB GDDR6X", "coreClock": "2610MHz", "memoryBus": "192-bit", "ports": "HDMI 2.1, DP 1.4a"},
        "wattage": 200,
    },
    {
        "name": "AMD Radeon RX 7800 XT (16GB GDDR6, 2430MHz)",
        "category": "vga",
        "brand": "AMD",
        "price": 13500000,
        "image": image("photo-1591488320449-011701bb6704"),
        "specs": {"memory": "16GB GDDR6", "coreClock": "2430MHz", "memoryBus": "256-bit", "ports": "HDMI 2.1, DP 2.1"},
        "wattage": 263,
    },
]

MAINBOARD_PRODUCTS = [
    {
        "name": "ASUS ROG Strix Z690-E Gaming WiFi (LGA1700, DDR5, PCIe 5.0)",
        "category": "mainboard",
        "brand": "ASUS",
        "price": 9500000,
        "image": image("photo-1518717758536-85ae29035b6d"),
        "specs": {"chipset": "Z690", "memoryType": "DDR5", "maxMemory": "128GB", "slots": "4x DIMM", "expansion": "PCIe 5.0"},
        "socket": "lga1700",
        "wattage": 50,
    },
    {
        "name": "MSI MAG B650 TOMAHAWK WiFi (AM5, DDR5, PCIe 5.0)",
        "category": "mainboard",
        "brand": "MSI",
        "price": 6800000,
        "image": image("photo-1518717758536-85ae29035b6d"),
        "specs": {"chipset": "B650", "memoryType": "DDR5", "maxMemory": "128GB", "slots": "4x DIMM", "expansion": "PCIe 5.0"},
        "socket": "am5",
        "wattage": 45,
    },
]

RAM_PRODUCTS = [
    {
        "name": "Kingston FURY Beast 32GB (2x16GB) DDR5 6000MHz",
        "category": "ram",
        "brand": "Kingston",
        "price": 2790000,
        "image": image("photo-1562976540-1502c2145186"),
        "specs": {"memoryType": "DDR5", "capacity": "32GB", "speed": "6000MHz"},
        "wattage": 10,
    },
    {
        "name": "Corsair Vengeance LPX 16GB (2x8GB) DDR4 3200MHz",
        "category": "ram",
        "brand": "Corsair",
        "price": 1190000,
        "image": image("photo-1562976540-1502c2145186"),
        "specs": {"memoryType": "DDR4", "capacity": "16GB", "speed": "3200MHz"},
        "wattage": 6,
    },
]

PSU_PRODUCTS = [
    {
        "name": "Corsair RM650e 650W 80 Plus Gold",
        "category": "psu",
        "brand": "Corsair",
        "price": 2290000,
        "image": image("photo-1587202372634-32705e3bf49c"),
        "specs": {"wattage": 650, "efficiency": "80 Plus Gold", "modular": "Full"},
    },
    {
        "name": "Seasonic FOCUS GX-850 850W 80 Plus Gold",
        "category": "psu",
        "brand": "Seasonic",
        "price": 3390000,
        "image": image("photo-1587202372634-32705e3bf49c"),
        "specs": {"wattage": 850, "efficiency": "80 Plus Gold", "modular": "Full"},
    },
]

SEED_PRODUCTS = CPU_PRODUCTS + VGA_PRODUCTS + MAINBOARD_PRODUCTS + RAM_PRODUCTS + PSU_PRODUCTS
