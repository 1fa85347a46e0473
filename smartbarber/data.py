# smartbarber/data.py

# Fixed daily slot grid. Changing shop hours means changing this table.
SLOT_LABELS = [
    "9:00 AM",
    "9:30 AM",
    "10:00 AM",
    "10:30 AM",
    "11:00 AM",
    "11:30 AM",
    "12:00 PM",
    "12:30 PM",
    "1:00 PM",
    "1:30 PM",
    "2:00 PM",
    "2:30 PM",
    "3:00 PM",
    "3:30 PM",
    "4:00 PM",
    "4:30 PM",
]

SEED_BARBERS = [
    {
        "name": "James Wilson",
        "avatar": "https://api.dicebear.com/7.x/avataaars/svg?seed=james",
        "specialties": ["Fades", "Beard Trim", "Classic Cuts"],
        "bio": "Professional barber with over 10 years of experience specializing in classic cuts and fades.",
        "rating": 4.8,
    },
    {
        "name": "Maria Rodriguez",
        "avatar": "https://api.dicebear.com/7.x/avataaars/svg?seed=maria",
        "specialties": ["Modern Styles", "Color", "Texture"],
        "bio": "Creative stylist with a passion for modern trends and color techniques.",
        "rating": 4.9,
    },
    {
        "name": "David Chen",
        "avatar": "https://api.dicebear.com/7.x/avataaars/svg?seed=david",
        "specialties": ["Skin Fades", "Designs", "Hot Towel Shave"],
        "bio": "Specializing in precision cuts and artistic designs with attention to detail.",
        "rating": 4.7,
    },
]

SEED_SERVICES = [
    {"name": "Haircut", "duration": "30 min", "price": 25, "description": "Standard haircut with clippers and scissors"},
    {"name": "Haircut & Beard Trim", "duration": "45 min", "price": 35, "description": "Haircut plus beard shaping and trimming"},
    {"name": "Premium Cut & Style", "duration": "60 min", "price": 45, "description": "Detailed haircut with styling and product finish"},
    {"name": "Hot Towel Shave", "duration": "30 min", "price": 30, "description": "Traditional straight razor shave with hot towel"},
    {"name": "Kids Haircut", "duration": "20 min", "price": 20, "description": "Haircut for children under 12"},
    {"name": "Hair Color", "duration": "90 min", "price": 60, "description": "Professional hair coloring service"},
]

DEMO_USER = {
    "name": "John Doe",
    "email": "john.doe@example.com",
    "password": "password123",
    "avatar": "https://api.dicebear.com/7.x/avataaars/svg?seed=john",
    "phone": "(555) 123-4567",
}
