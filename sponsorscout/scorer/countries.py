#!/usr/bin/env python3
"""
Countries - Country detection and sponsored visa routes.

Job records do not always carry an ISO country code. The location text
(and optionally the job description) is then scanned for city and
country keywords, in table order; the first country with a hit wins.
"""

from typing import Dict, Optional, Tuple

from sponsorscout.schema_models import NormalizedJob

COUNTRY_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    'GB': ('london', 'manchester', 'edinburgh', 'birmingham', 'uk', 'united kingdom'),
    'NL': ('amsterdam', 'rotterdam', 'the hague', 'utrecht', 'netherlands'),
    'DE': ('berlin', 'munich', 'frankfurt', 'hamburg', 'germany'),
    'SE': ('stockholm', 'gothenburg', 'malmö', 'sweden'),
    'AE': ('dubai', 'abu dhabi', 'uae'),
    'AU': ('sydney', 'melbourne', 'brisbane', 'australia'),
    'CA': ('toronto', 'vancouver', 'montreal', 'canada'),
}

VISA_CATEGORIES: Dict[str, Tuple[str, ...]] = {
    'GB': ('Skilled Worker Visa', 'Global Talent Visa'),
    'NL': ('Highly Skilled Migrant', '30% Ruling'),
    'DE': ('EU Blue Card', 'Skilled Worker Residence Permit'),
    'SE': ('Work Permit for Skilled Workers',),
    'AE': ('Employment Visa',),
    'AU': ('Temporary Skill Shortage (TSS)', 'Employer Nomination Scheme'),
    'CA': ('LMIA Work Permit', 'Provincial Nominee Program'),
}


def detect_country_code(location: Optional[str], text: Optional[str] = None) -> Optional[str]:
    """Guess an ISO country code from free-text location and description.

    Returns None when no keyword matches.
    """
    location_lower = (location or '').lower()
    text_lower = (text or '').lower()
    for code, keywords in COUNTRY_KEYWORDS.items():
        if any(kw in location_lower or kw in text_lower for kw in keywords):
            return code
    return None


def resolve_country_code(job: NormalizedJob) -> Optional[str]:
    """The job's explicit country code, else one detected from its location."""
    return job.country_code or detect_country_code(job.location)


def determine_visa_categories(country_code: Optional[str]) -> Tuple[str, ...]:
    """Sponsored work visa routes for a country; empty when unknown."""
    return VISA_CATEGORIES.get((country_code or '').upper(), ())
