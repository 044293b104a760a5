"""Geographical terms stripped from text before lexical analysis.

Place names are frequent in document titles and would otherwise count as
unknown (non-English) vocabulary. Each entry is ``(term, kind)``; only the
term is used for matching.
"""
from typing import List, Tuple

GEOGRAPHICAL_TERMS: List[Tuple[str, str]] = [
    # Countries (endonyms)
    ('Deutschland', 'country'),
    ('Österreich', 'country'),
    ('Schweiz', 'country'),
    ('Suisse', 'country'),
    ('Svizzera', 'country'),
    ('Nederland', 'country'),
    ('België', 'country'),
    ('Belgique', 'country'),
    ('España', 'country'),
    ('Italia', 'country'),
    ('Brasil', 'country'),
    ('México', 'country'),
    ('Polska', 'country'),
    ('Türkiye', 'country'),
    ('Danmark', 'country'),
    ('Norge', 'country'),
    ('Sverige', 'country'),
    ('Suomi', 'country'),
    # Cities
    ('München', 'city'),
    ('Köln', 'city'),
    ('Düsseldorf', 'city'),
    ('Nürnberg', 'city'),
    ('Zürich', 'city'),
    ('Genève', 'city'),
    ('Montréal', 'city'),
    ('Québec', 'city'),
    ('São Paulo', 'city'),
    ('Bogotá', 'city'),
    ('Kraków', 'city'),
    ('Wrocław', 'city'),
    ('Göteborg', 'city'),
    ('Malmö', 'city'),
    ('Århus', 'city'),
    ('Tromsø', 'city'),
    ('İstanbul', 'city'),
    ('Sevilla', 'city'),
    ('Firenze', 'city'),
    ('Venezia', 'city'),
    ('Milano', 'city'),
    ('Napoli', 'city'),
    ('Lisboa', 'city'),
    # Regions
    ('Bayern', 'region'),
    ('Catalunya', 'region'),
    ('Andalucía', 'region'),
    ('Lombardia', 'region'),
    ('Île-de-France', 'region'),
]
