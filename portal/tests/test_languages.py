"""Tests for language resolution."""

from __future__ import annotations

from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase, override_settings

from portal.languages import (
    default_language,
    is_supported,
    resolve,
    resolve_alias,
    split_locale,
    supported_languages,
    validate_language_settings,
)


class ResolveTests(SimpleTestCase):
    """Supported codes pass through; everything else falls back."""

    def test_supported_codes_are_returned_unchanged(self) -> None:
        for code in supported_languages():
            with self.subTest(code=code):
                self.assertEqual(resolve(code), code)

    def test_unknown_tokens_fall_back_to_default(self) -> None:
        for token in (None, '', 'fr', 'english', ' ko', 'ko/'):
            with self.subTest(token=token):
                self.assertEqual(resolve(token), 'ko')

    def test_casing_is_not_normalized(self) -> None:
        self.assertEqual(resolve('EN'), default_language())
        self.assertEqual(resolve('Ja'), default_language())
        self.assertFalse(is_supported('EN'))

    def test_non_string_tokens_fall_back(self) -> None:
        self.assertEqual(resolve(42), 'ko')

    @override_settings(LANGUAGE_CODE='en')
    def test_default_follows_settings(self) -> None:
        self.assertEqual(resolve('xx'), 'en')


class AliasTests(SimpleTestCase):

    def test_country_codes_map_to_languages(self) -> None:
        self.assertEqual(resolve_alias('kr'), 'ko')
        self.assertEqual(resolve_alias('jp'), 'ja')
        self.assertEqual(resolve_alias('cn'), 'zh')
        self.assertEqual(resolve_alias('in'), 'id')

    def test_unknown_alias(self) -> None:
        self.assertIsNone(resolve_alias('fr'))
        self.assertIsNone(resolve_alias(None))

    @override_settings(LANGUAGES=[('ko', 'Korean'), ('en', 'English')])
    def test_alias_to_unsupported_language_is_ignored(self) -> None:
        self.assertIsNone(resolve_alias('jp'))


class SplitLocaleTests(SimpleTestCase):

    def test_splits_leading_locale(self) -> None:
        self.assertEqual(split_locale('/en/vote/12'), ('en', '/vote/12'))
        self.assertEqual(split_locale('/en/'), ('en', '/'))
        self.assertEqual(split_locale('/en'), ('en', '/'))

    def test_query_stays_on_remainder(self) -> None:
        self.assertEqual(split_locale('/en?x=1'), ('en', '/?x=1'))
        self.assertEqual(split_locale('/en/vote?x=1'), ('en', '/vote?x=1'))
        self.assertEqual(split_locale('/vote?x=1'), (None, '/vote?x=1'))

    def test_non_locale_first_segment(self) -> None:
        self.assertEqual(split_locale('/vote/en/'), (None, '/vote/en/'))
        self.assertEqual(split_locale('/EN/vote'), (None, '/EN/vote'))


class ValidateSettingsTests(SimpleTestCase):

    def test_default_configuration_is_valid(self) -> None:
        validate_language_settings()

    @override_settings(LANGUAGES=[])
    def test_empty_language_set(self) -> None:
        with self.assertRaises(ImproperlyConfigured):
            validate_language_settings()

    @override_settings(LANGUAGE_CODE='fr')
    def test_default_must_be_supported(self) -> None:
        with self.assertRaises(ImproperlyConfigured):
            validate_language_settings()
