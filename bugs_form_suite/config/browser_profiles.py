"""
Browser profiles for the pages a scenario runs against.
Each profile names a browser engine and a viewport.
"""

from typing import Dict, List, Any


class BrowserProfiles:
    """Browser configuration profiles."""

    # Engine per profile
    ENGINES = {
        'desktop_chromium': 'chromium',
        'desktop_firefox': 'firefox',
        'desktop_webkit': 'webkit',
        'mobile_chromium': 'chromium',
    }

    # Viewport presets
    VIEWPORTS = {
        'desktop': {'width': 1366, 'height': 768},
        'mobile': {'width': 375, 'height': 667},
    }

    # Browser launch arguments (chromium only)
    CHROMIUM_ARGS = [
        '--disable-dev-shm-usage',
        '--no-sandbox',
    ]

    @classmethod
    def names(cls) -> List[str]:
        """Get all known profile names."""
        return list(cls.ENGINES)

    @classmethod
    def get_profile(cls, profile_name: str = 'desktop_chromium') -> Dict[str, Any]:
        """
        Get a complete browser profile configuration.

        Args:
            profile_name: Name of the profile (desktop_chromium, desktop_firefox, etc.)

        Returns:
            Dictionary with name, engine, viewport, and args

        Raises:
            ValueError: If the profile is unknown
        """
        if profile_name not in cls.ENGINES:
            raise ValueError(
                f"Unknown browser profile: {profile_name}. "
                f"Expected one of: {', '.join(cls.names())}"
            )

        engine = cls.ENGINES[profile_name]
        viewport_type = 'mobile' if profile_name.startswith('mobile') else 'desktop'

        return {
            'name': profile_name,
            'engine': engine,
            'viewport': cls.VIEWPORTS[viewport_type],
            'args': cls.CHROMIUM_ARGS if engine == 'chromium' else [],
        }
