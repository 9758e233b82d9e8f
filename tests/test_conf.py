"""
Tests for settings handling.
"""

import pytest
from datetime import datetime

import timeexpr
from timeexpr.conf import Settings, SettingValidationError, apply_settings, settings


class TestSettings:
    """Tests for Settings and apply_settings."""

    def test_defaults(self):
        assert settings.RELATIVE_BASE is None
        assert settings.LOCALE == 'en'
        assert settings.RETURN_TIME_RANGES is True
        assert settings._default

    def test_replace_returns_cached_instance(self):
        """Test equal modifications share one Settings object."""
        first = settings.replace({'LOCALE': 'fr'})
        second = settings.replace({'LOCALE': 'fr'})
        assert first is second
        assert first.LOCALE == 'fr'
        assert not first._default
        assert settings.LOCALE == 'en'

    def test_unknown_setting(self):
        with pytest.raises(SettingValidationError):
            settings.replace({'NOT_A_SETTING': 1})

    @pytest.mark.parametrize("mod_settings", [
        {'LOCALE': 'xx'},
        {'LOCALE': 5},
        {'RETURN_TIME_RANGES': 'yes'},
        {'RELATIVE_BASE': '2023-10-15'},
    ])
    def test_invalid_values(self, mod_settings):
        with pytest.raises(SettingValidationError):
            settings.replace(mod_settings)

    def test_setting_validation_error_is_value_error(self):
        assert issubclass(SettingValidationError, ValueError)

    def test_apply_settings_passes_instance(self):
        """Test the decorator always hands a Settings instance over."""
        @apply_settings
        def probe(settings=None):
            return settings

        assert probe() is settings
        assert isinstance(probe(settings={'LOCALE': 'fr'}), Settings)
        assert probe(settings={'LOCALE': 'fr'}).LOCALE == 'fr'

    def test_apply_settings_rejects_other_types(self):
        @apply_settings
        def probe(settings=None):
            return settings

        with pytest.raises(TypeError):
            probe(settings=['LOCALE'])


class TestSettingsInApi:
    """Tests for settings used by the package functions."""

    def test_relative_base(self):
        """Test RELATIVE_BASE provides the implied date."""
        result = timeexpr.extract_time("15:30", settings={'RELATIVE_BASE': datetime(2020, 2, 29)})
        assert (result.start.year, result.start.month, result.start.day) == (2020, 2, 29)
        assert result.reference == datetime(2020, 2, 29)

    def test_explicit_reference_wins(self):
        result = timeexpr.extract_time(
            "15:30",
            reference=datetime(2023, 10, 15),
            settings={'RELATIVE_BASE': datetime(2020, 2, 29)},
        )
        assert result.start.day == 15

    def test_default_reference_is_now(self):
        """Test the current local date is used without a reference."""
        before = datetime.now().date()
        result = timeexpr.extract_time("15:30")
        after = datetime.now().date()
        assert before <= result.reference.date() <= after
        assert result.start.day == result.reference.day

    def test_locale_setting(self):
        result = timeexpr.extract_time("9:00 à 11:00", reference=datetime(2023, 10, 15), settings={'LOCALE': 'fr'})
        assert result.end.hour == 11

    def test_locale_argument_overrides_setting(self):
        result = timeexpr.extract_time(
            "9:00 à 11:00", reference=datetime(2023, 10, 15), locale='en', settings={'LOCALE': 'fr'}
        )
        assert result.end is None

    def test_non_string_input(self):
        with pytest.raises(TypeError):
            timeexpr.extract_time(1530)
        with pytest.raises(TypeError):
            timeexpr.search_times(None)
