import hashlib
import json
from typing import Optional

from sponsorscout.config_loader import ScoringConfig
from sponsorscout.schema_models import NormalizedJob, UserProfile, VisaSignal


class ScoreFingerprinter:
    """
    Pure logic for creating deterministic cache keys for score results.
    """

    @staticmethod
    def calculate(
        job: NormalizedJob,
        profile: UserProfile,
        visa_signal: VisaSignal,
        config: Optional[ScoringConfig] = None
    ) -> str:
        """
        Create a deterministic hash of every scoring input.
        Formula: SHA256(canonical JSON of job | profile | visa signal | weights)

        Identical inputs always score identically, so the digest can key
        a memoized MultiScoreResult.
        """
        payload = {
            'job': job.model_dump(mode='json'),
            'profile': profile.model_dump(mode='json'),
            'visa_signal': visa_signal.model_dump(mode='json'),
            'weights': (config or ScoringConfig()).model_dump(mode='json'),
        }
        raw_string = json.dumps(payload, sort_keys=True, separators=(',', ':'))
        return hashlib.sha256(raw_string.encode('utf-8')).hexdigest()
