"""Tests for locale-prefixed path rewriting."""

from __future__ import annotations

from django.test import SimpleTestCase

from portal.paths import localize, localized_path, strip_locale

PATHS = [
    '/',
    '/vote/',
    '/vote/12',
    '/vote/12?tab=ranking&lang=ko',
    '/mypage/qna/7/',
    '/media/ko/ko/',
]


class LocalizeTests(SimpleTestCase):
    """Swap and prepend behavior of localize()."""

    def test_swaps_leading_locale(self) -> None:
        self.assertEqual(localize('/ko/vote/12', 'ko', 'en'), '/en/vote/12')

    def test_swap_preserves_remainder(self) -> None:
        for path in PATHS:
            prefixed = '/ko' + path
            with self.subTest(path=prefixed):
                result = localize(prefixed, 'ko', 'ja')
                self.assertTrue(result.startswith('/ja/'))
                self.assertEqual(result[len('/ja'):], path)

    def test_only_leading_segment_is_replaced(self) -> None:
        self.assertEqual(
            localize('/ko/media/ko/clip?lang=ko', 'ko', 'en'),
            '/en/media/ko/clip?lang=ko',
        )

    def test_prepends_when_not_under_current_locale(self) -> None:
        for path in PATHS:
            with self.subTest(path=path):
                self.assertEqual(localize(path, 'ko', 'en'), '/en' + path)

    def test_prepend_does_not_strip_other_locales(self) -> None:
        # Path is under 'en' but current is 'ko': treated as locale-less
        self.assertEqual(localize('/en/vote', 'ko', 'ja'), '/ja/en/vote')

    def test_root_redirect_target(self) -> None:
        self.assertEqual(localize('/vote', 'ko', 'ko'), '/ko/vote')

    def test_idempotent_for_same_target(self) -> None:
        for path in PATHS + ['/ko' + path for path in PATHS]:
            with self.subTest(path=path):
                once = localize(path, 'ko', 'en')
                self.assertEqual(localize(once, 'en', 'en'), once)

    def test_malformed_paths_are_prefixed(self) -> None:
        self.assertEqual(localize('', 'ko', 'en'), '/en/')
        self.assertEqual(localize('vote', 'ko', 'en'), '/en/vote')


class StripAndLocalizedPathTests(SimpleTestCase):

    def test_strip_locale(self) -> None:
        self.assertEqual(strip_locale('/ja/vote/3'), '/vote/3')
        self.assertEqual(strip_locale('/ja'), '/')
        self.assertEqual(strip_locale('/vote/3'), '/vote/3')

    def test_localized_path_replaces_any_locale(self) -> None:
        self.assertEqual(localized_path('/zh/vote/', 'en'), '/en/vote/')
        self.assertEqual(localized_path('/vote/', 'en'), '/en/vote/')
        self.assertEqual(localized_path('/', 'id'), '/id/')
        self.assertEqual(localized_path('/login', 'ko'), '/ko/login')

    def test_bare_locale_with_query(self) -> None:
        self.assertEqual(strip_locale('/en?x=1'), '/?x=1')
        self.assertEqual(localized_path('/en?x=1', 'ko'), '/ko/?x=1')
        self.assertEqual(localized_path('/en', 'ko'), '/ko/')
