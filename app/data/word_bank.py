"""
Category word bank for the "generate category words" flow.

Categories without a word list yet are still offered in CATEGORIES; lookups
for them fall back to DEFAULT_CATEGORY.
"""

WORD_BANK_VERSION = 1

DEFAULT_CATEGORY = "Familie"

CATEGORIES = {
    "Familie": "Family & Relationships",
    "Zuhause": "Home & Household",
    "Essen": "Food & Drink",
    "Kleidung": "Clothing & Fashion",
    "Gesundheit": "Health & Body",
    "Reisen": "Travel & Transportation",
    "Bildung": "Education & School",
    "Arbeit": "Work & Career",
    "Sport": "Sports & Recreation",
    "Natur": "Nature & Environment",
    "Wetter": "Weather & Seasons",
    "Zahlen": "Numbers & Mathematics",
    "Zeit": "Time & Dates",
    "Farben": "Colors & Shapes",
    "Tiere": "Animals & Wildlife",
    "Technologie": "Technology & Internet",
    "Kunst": "Arts & Culture",
    "Medien": "Media & Entertainment",
    "Politik": "Politics & Government",
    "Wirtschaft": "Economy & Business",
    "Recht": "Law & Justice",
    "Emotionen": "Emotions & Feelings",
    "Persönlichkeit": "Personality & Character",
    "Kommunikation": "Communication & Language",
    "Feiertage": "Holidays & Celebrations",
    "Städte": "Cities & Places",
    "Geographie": "Geography & Landscape",
    "Wissenschaft": "Science & Research",
    "Geschichte": "History & Events",
    "Philosophie": "Philosophy & Religion",
}

WORDS_BY_CATEGORY = {
    "Familie": (
        ("die Familie", "family"),
        ("der Vater", "father"),
        ("die Mutter", "mother"),
        ("der Sohn", "son"),
        ("die Tochter", "daughter"),
        ("der Bruder", "brother"),
        ("die Schwester", "sister"),
        ("die Großeltern", "grandparents"),
        ("der Großvater", "grandfather"),
        ("die Großmutter", "grandmother"),
        ("der Onkel", "uncle"),
        ("die Tante", "aunt"),
        ("der Cousin", "male cousin"),
        ("die Cousine", "female cousin"),
        ("die Eltern", "parents"),
        ("die Geschwister", "siblings"),
        ("der Ehemann", "husband"),
        ("die Ehefrau", "wife"),
        ("der Schwiegervater", "father-in-law"),
        ("die Schwiegermutter", "mother-in-law"),
    ),
    "Zuhause": (
        ("das Haus", "house"),
        ("die Wohnung", "apartment"),
        ("das Zimmer", "room"),
        ("die Küche", "kitchen"),
        ("das Badezimmer", "bathroom"),
        ("das Schlafzimmer", "bedroom"),
        ("das Wohnzimmer", "living room"),
        ("der Tisch", "table"),
        ("der Stuhl", "chair"),
        ("das Sofa", "sofa"),
        ("das Bett", "bed"),
        ("der Schrank", "cabinet"),
        ("der Kühlschrank", "refrigerator"),
        ("der Herd", "stove"),
        ("der Ofen", "oven"),
        ("die Spülmaschine", "dishwasher"),
        ("die Waschmaschine", "washing machine"),
        ("der Fernseher", "television"),
        ("der Garten", "garden"),
        ("der Balkon", "balcony"),
    ),
    "Essen": (
        ("das Brot", "bread"),
        ("der Käse", "cheese"),
        ("die Milch", "milk"),
        ("das Ei", "egg"),
        ("das Fleisch", "meat"),
        ("das Huhn", "chicken"),
        ("der Fisch", "fish"),
        ("das Gemüse", "vegetables"),
        ("die Karotte", "carrot"),
        ("die Kartoffel", "potato"),
        ("der Reis", "rice"),
        ("die Nudeln", "pasta"),
        ("der Apfel", "apple"),
        ("die Banane", "banana"),
        ("die Orange", "orange"),
        ("die Suppe", "soup"),
        ("der Salat", "salad"),
        ("der Kuchen", "cake"),
        ("die Schokolade", "chocolate"),
        ("das Wasser", "water"),
    ),
    "Kleidung": (
        ("die Kleidung", "clothing"),
        ("das Hemd", "shirt"),
        ("die Hose", "pants"),
        ("der Rock", "skirt"),
        ("das Kleid", "dress"),
        ("der Pullover", "sweater"),
        ("die Jacke", "jacket"),
        ("der Mantel", "coat"),
        ("die Socken", "socks"),
        ("die Schuhe", "shoes"),
        ("die Stiefel", "boots"),
        ("die Mütze", "cap"),
        ("der Hut", "hat"),
        ("der Schal", "scarf"),
        ("die Handschuhe", "gloves"),
        ("die Unterwäsche", "underwear"),
        ("der Anzug", "suit"),
        ("die Krawatte", "tie"),
        ("der Gürtel", "belt"),
        ("die Tasche", "bag"),
    ),
    "Sport": (
        ("der Sport", "sport"),
        ("der Fußball", "soccer"),
        ("der Basketball", "basketball"),
        ("das Tennis", "tennis"),
        ("das Schwimmen", "swimming"),
        ("das Laufen", "running"),
        ("das Radfahren", "cycling"),
        ("das Skifahren", "skiing"),
        ("das Fitnessstudio", "gym"),
        ("das Training", "training"),
        ("der Wettkampf", "competition"),
        ("der Spieler", "player"),
        ("der Trainer", "coach"),
        ("die Mannschaft", "team"),
        ("der Ball", "ball"),
        ("das Tor", "goal"),
        ("die Medaille", "medal"),
        ("der Sieger", "winner"),
        ("das Spiel", "game"),
        ("die Olympischen Spiele", "Olympic Games"),
    ),
    "Bildung": (
        ("die Schule", "school"),
        ("die Universität", "university"),
        ("der Lehrer", "teacher (male)"),
        ("die Lehrerin", "teacher (female)"),
        ("der Schüler", "student (male, school)"),
        ("die Schülerin", "student (female, school)"),
        ("der Student", "student (male, university)"),
        ("die Studentin", "student (female, university)"),
        ("das Klassenzimmer", "classroom"),
        ("der Unterricht", "lesson"),
        ("die Hausaufgabe", "homework"),
        ("die Prüfung", "exam"),
        ("das Buch", "book"),
        ("das Heft", "notebook"),
        ("der Stift", "pen"),
        ("der Bleistift", "pencil"),
        ("die Tafel", "blackboard"),
        ("das Fach", "subject"),
        ("die Mathematik", "mathematics"),
        ("die Sprache", "language"),
    ),
}
