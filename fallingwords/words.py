from typing import Optional

ALL_THEME = "all"

CATEGORIES: dict[str, list[str]] = {
    "animals": [
        "cat", "dog", "lion", "tiger", "elephant", "bear", "wolf", "eagle", "shark", "whale",
        "giraffe", "zebra", "panda", "kangaroo", "penguin", "dolphin", "leopard", "crocodile", "fox", "owl",
    ],
    "food": [
        "pizza", "burger", "pasta", "rice", "bread", "cake", "chocolate", "sushi", "noodles", "steak",
        "sandwich", "salad", "icecream", "taco", "burrito", "dumpling", "cheese", "butter", "jam", "cookie",
    ],
    "college": [
        "campus", "lecture", "exam", "thesis", "student", "library", "assignment", "professor", "classroom", "research",
        "seminar", "presentation", "dormitory", "scholarship", "whiteboard", "notebook", "curriculum", "graduation",
        "syllabus", "internship",
    ],
    "computer": [
        "keyboard", "mouse", "monitor", "laptop", "code", "binary", "server", "database", "python", "javascript",
        "algorithm", "compiler", "debug", "network", "html", "css", "router", "firewall", "cloud", "storage",
    ],
    "sports": [
        "football", "basketball", "tennis", "golf", "swimming", "running", "cycling", "baseball", "boxing", "cricket",
        "volleyball", "hockey", "rugby", "karate", "judo", "surfing", "skating", "skiing", "archery", "fencing",
    ],
    "music": [
        "guitar", "piano", "violin", "drum", "flute", "song", "melody", "lyrics", "concert", "band",
        "microphone", "speaker", "note", "chord", "harmony", "solo", "orchestra", "album", "genre", "tempo",
    ],
    "movies": [
        "actor", "director", "cinema", "screen", "scene", "action", "comedy", "drama", "thriller", "animation",
        "script", "camera", "editing", "blockbuster", "premiere", "sequel", "trailer", "costume", "soundtrack", "studio",
    ],
    "science": [
        "atom", "molecule", "gravity", "energy", "planet", "galaxy", "neutron", "electron", "biology", "chemistry",
        "physics", "microscope", "telescope", "experiment", "equation", "theory", "quantum", "genetics", "ecology",
        "volcano",
    ],
    "geography": [
        "mountain", "river", "desert", "ocean", "island", "forest", "valley", "canyon", "waterfall", "volcano",
        "continent", "country", "city", "village", "glacier", "bay", "peninsula", "plateau", "reef", "delta",
    ],
    "transportation": [
        "car", "bus", "train", "bicycle", "motorcycle", "airplane", "ship", "subway", "truck", "tram",
        "scooter", "helicopter", "rocket", "yacht", "canoe", "kayak", "ferry", "taxi", "van", "metro",
    ],
    "colors": [
        "red", "blue", "green", "yellow", "orange", "purple", "pink", "brown", "black", "white",
        "gray", "cyan", "magenta", "maroon", "beige", "turquoise", "gold", "silver", "navy", "olive",
    ],
    "jobs": [
        "teacher", "doctor", "nurse", "engineer", "farmer", "pilot", "chef", "artist", "writer", "scientist",
        "lawyer", "police", "firefighter", "dentist", "driver", "mechanic", "actor", "singer", "designer", "programmer",
    ],
}


def build_catalog(categories: dict[str, list[str]]) -> dict[str, list[str]]:
    """
    Return a theme -> word list mapping with the synthetic "all" theme first.
    "all" is every category list concatenated, so words that appear in two
    categories appear twice.
    """
    catalog = {ALL_THEME: [w for words in categories.values() for w in words if w]}
    for name, words in categories.items():
        if name != ALL_THEME:
            catalog[name] = list(words)
    return catalog


WORD_CATALOG = build_catalog(CATEGORIES)


def theme_names(catalog: Optional[dict[str, list[str]]] = None) -> list[str]:
    return list((WORD_CATALOG if catalog is None else catalog).keys())


def words_for(theme: str, catalog: Optional[dict[str, list[str]]] = None) -> list[str]:
    """Word list for a theme; unknown themes get the "all" list."""
    catalog = WORD_CATALOG if catalog is None else catalog
    if theme in catalog:
        return catalog[theme]
    return catalog.get(ALL_THEME, [])
