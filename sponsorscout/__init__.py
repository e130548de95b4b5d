"""SponsorScout - explainable job scoring against a visa-seeking user profile."""
