#!/usr/bin/env python3
"""
Generate a demo journal CSV for local Vsesvit development.
Usage (inside the repo root):
    python scripts/seed_demo_csv.py
Creates: scripts/demo.csv  — point DATASET_SOURCE at it in .env
"""
import random
from pathlib import Path

import pandas as pd

CSV_PATH = Path(__file__).parent / "demo.csv"

COUNTRIES = [
    ("Австралія", "Australia"),
    ("США", "USA"),
    ("Велика Британія", "United Kingdom"),
    ("Франція", "France"),
    ("Чилі", "Chile"),
    ("Японія", "Japan"),
    ("Польща", "Poland"),
]
LANGUAGES = {
    "Australia": ("англійська", "English"),
    "USA": ("англійська", "English"),
    "United Kingdom": ("англійська", "English"),
    "France": ("французька", "French"),
    "Chile": ("іспанська", "Spanish"),
    "Japan": ("японська", "Japanese"),
    "Poland": ("польська", "Polish"),
}
TRANSLATORS = ["Mykola Lukash", "Hryhorii Kochur", "Solomiia Pavlychko", "Ivan Koval", "-"]
TOPICS = ["Revolution", "Spring", "The Sea", "War", "Childhood", "The City", "Letters", "Exile"]


def seed(issues: int = 120, seed_value: int = 42):
    random.seed(seed_value)
    authors = {latin: [f"Author {latin} {i}" for i in range(1, 6)] for _, latin in COUNTRIES}

    rows = []
    for n in range(issues):
        year = random.randint(1925, 2009)
        number = random.randint(1, 12)
        journal_id = f"V{year}-{number:02d}-{n:03d}"
        for _ in range(random.randint(3, 8)):
            country, country_latin = random.choice(COUNTRIES)
            language_name, language_latin = LANGUAGES[country_latin]
            rows.append({
                "journal_id": journal_id,
                "journal_name": "Всесвіт",
                "journal_year": year,
                "journal_number": number,
                "article_name": f"{random.choice(TOPICS)} {random.choice(['Stories', 'Poems', 'Essays', 'Notes'])}",
                "author": random.choice(authors[country_latin]),
                "translator": random.choice(TRANSLATORS),
                "language_name": language_name,
                "language_latin": language_latin,
                "country": country,
                "country_latin": country_latin,
            })

    pd.DataFrame(rows).to_csv(CSV_PATH, index=False)
    print(f"Demo dataset written: {CSV_PATH} ({len(rows)} articles in {issues} issues)")


if __name__ == "__main__":
    seed()
