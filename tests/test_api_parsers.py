"""
Tests for api.parsers – inline HTML only, no network.
"""
import os
import sys

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

import pytest

from api.exceptions import ExtractionError
from api.parsers import parse_search_page, parse_detail_page
from api.parsers.common import (
    normalize_anime_id,
    select_one_or_raise,
    attr_or_raise,
    parse_document,
    parse_fragment,
    inner_html,
)
from api.parsers.detail_parser import NAME_SELECTOR, POSTER_SELECTOR, SYNOPSIS_SELECTOR


def _card(href, title='Title'):
    return (
        '<div class="flw-item"><div class="film-poster"></div>'
        f'<div class="film-detail"><h3 class="film-name"><a href="{href}">{title}</a></h3></div></div>'
    )


def _detail_page(name=True, synopsis=True, poster=True, poster_src='https://img.example/p.jpg'):
    parts = ['<html><body>']
    if poster:
        if poster_src is None:
            parts.append('<img class="film-poster-img" alt="no src">')
        else:
            parts.append(f'<img class="film-poster-img" src="{poster_src}">')
    if name:
        parts.append('<h2 class="film-name dynamic-name">  Frieren  </h2>')
    if synopsis:
        parts.append('<div class="film-description"><div class="text">\n  A journey.\n</div></div>')
    parts.append('</body></html>')
    return ''.join(parts)


# ===================================================================
# Common utilities
# ===================================================================

class TestNormalizeAnimeId:
    def test_strips_ref_and_leading_slash(self):
        assert normalize_anime_id('/jujutsu-kaisen-tv-534?ref=search') == 'jujutsu-kaisen-tv-534'

    def test_removes_every_slash(self):
        assert normalize_anime_id('/watch/one-piece-100/?ref=search') == 'watchone-piece-100'

    def test_without_ref_suffix(self):
        assert normalize_anime_id('/naruto-677') == 'naruto-677'

    def test_other_query_kept(self):
        assert normalize_anime_id('/naruto-677?ep=1') == 'naruto-677?ep=1'


class TestStrictSelection:
    def test_select_one_returns_first_match(self):
        soup = parse_document('<p class="x">one</p><p class="x">two</p>')
        assert select_one_or_raise(soup, 'p.x').get_text() == 'one'

    def test_select_one_raises_on_no_match(self):
        soup = parse_document('<p>one</p>')
        with pytest.raises(ExtractionError) as exc_info:
            select_one_or_raise(soup, 'p.missing')
        assert exc_info.value.selector == 'p.missing'
        assert exc_info.value.attribute is None

    def test_attr_returns_value_verbatim(self):
        soup = parse_document('<img src="  spaced.jpg  ">')
        assert attr_or_raise(soup.img, 'src', 'img') == '  spaced.jpg  '

    def test_attr_raises_when_absent(self):
        soup = parse_document('<img alt="x">')
        with pytest.raises(ExtractionError) as exc_info:
            attr_or_raise(soup.img, 'src', 'img')
        assert exc_info.value.attribute == 'src'

    def test_inner_html_keeps_markup(self):
        soup = parse_document('<div id="d"> a <b>bold</b> </div>')
        assert inner_html(soup.div) == ' a <b>bold</b> '

    def test_inner_html_void_elements_without_slash(self):
        soup = parse_document('<div>a<br/>b<img src="x.jpg"/></div>')
        assert inner_html(soup.div) == 'a<br>b<img src="x.jpg">'

    def test_fragment_is_standalone(self):
        fragment = parse_fragment('<div class="flw-item"><div></div></div>')
        assert fragment.select('div.flw-item')[0].parent is fragment


# ===================================================================
# Search parser
# ===================================================================

class TestParseSearchPage:
    def test_single_card_fragment(self):
        html = (
            '<div class="film_list-wrap"><div class="flw-item"><div></div><div><h3>'
            '<a href="/jujutsu-kaisen-tv-534?ref=search">JJK</a></h3></div></div></div>'
        )
        result = parse_search_page(html)
        assert result.to_dict() == {'results': [{'id': 'jujutsu-kaisen-tv-534'}]}

    def test_full_page_document_order(self, sample_search_html):
        result = parse_search_page(sample_search_html)
        assert result.get_ids() == [
            'jujutsu-kaisen-tv-534',
            'jujutsu-kaisen-0-movie-17763',
            'jujutsu-kaisen-2nd-season-18413',
        ]

    def test_n_cards_give_n_ids(self):
        cards = ''.join(_card(f'/title-{i}?ref=search') for i in range(7))
        result = parse_search_page(f'<div class="film_list-wrap">{cards}</div>')
        assert result.get_ids() == [f'title-{i}' for i in range(7)]

    def test_ids_have_no_slash_or_ref(self, sample_search_html):
        for anime_id in parse_search_page(sample_search_html).get_ids():
            assert '/' not in anime_id
            assert '?ref=search' not in anime_id

    def test_multiple_containers_concatenated(self):
        html = (
            f'<div class="film_list-wrap">{_card("/a-1?ref=search")}</div>'
            f'<div class="film_list-wrap">{_card("/b-2?ref=search")}{_card("/c-3?ref=search")}</div>'
        )
        assert parse_search_page(html).get_ids() == ['a-1', 'b-2', 'c-3']

    def test_duplicates_are_kept(self):
        html = f'<div class="film_list-wrap">{_card("/a-1?ref=search")}{_card("/a-1?ref=search")}</div>'
        assert parse_search_page(html).get_ids() == ['a-1', 'a-1']

    def test_no_container_gives_empty_results(self):
        result = parse_search_page('<html><body><p>No results</p></body></html>')
        assert result.results == []

    def test_container_without_cards_gives_empty_results(self):
        result = parse_search_page('<div class="film_list-wrap"><p>Nothing found</p></div>')
        assert result.to_dict() == {'results': []}

    def test_link_in_first_child_div_is_ignored(self):
        html = (
            '<div class="film_list-wrap"><div class="flw-item">'
            '<div><h3><a href="/poster-1">P</a></h3></div>'
            '<div><p>no heading</p></div>'
            '</div></div>'
        )
        assert parse_search_page(html).results == []

    def test_heading_not_first_child_is_ignored(self):
        html = (
            '<div class="film_list-wrap"><div class="flw-item"><div></div>'
            '<div><span>x</span><h3><a href="/late-1">L</a></h3></div>'
            '</div></div>'
        )
        assert parse_search_page(html).results == []

    def test_card_wrapped_inside_container_matches(self):
        html = (
            '<div class="film_list-wrap"><section>'
            f'{_card("/wrapped-9?ref=search")}'
            '</section></div>'
        )
        assert parse_search_page(html).get_ids() == ['wrapped-9']

    def test_missing_href_raises(self):
        html = (
            '<div class="film_list-wrap"><div class="flw-item"><div></div>'
            '<div><h3><a>No link</a></h3></div></div></div>'
        )
        with pytest.raises(ExtractionError) as exc_info:
            parse_search_page(html)
        assert exc_info.value.attribute == 'href'


# ===================================================================
# Detail parser
# ===================================================================

class TestParseDetailPage:
    def test_full_page(self, sample_detail_html):
        detail = parse_detail_page(sample_detail_html)
        assert detail.name == 'Jujutsu Kaisen (TV)'
        assert detail.synopsis == 'Idly indulging in baseless paranormal activities with the Occult Club.'
        assert detail.poster_image == 'https://img.zorores.com/_r/300x400/100/jjk.jpg'

    def test_name_and_synopsis_trimmed(self):
        detail = parse_detail_page(_detail_page())
        assert detail.name == 'Frieren'
        assert detail.synopsis == 'A journey.'

    def test_poster_not_trimmed(self):
        detail = parse_detail_page(_detail_page(poster_src=' https://img.example/p.jpg '))
        assert detail.poster_image == ' https://img.example/p.jpg '

    def test_synopsis_keeps_inner_markup(self):
        html = _detail_page(synopsis=False).replace(
            '</body>',
            '<div class="film-description"><div> Line one<br/>Line two </div></div></body>',
        )
        assert parse_detail_page(html).synopsis == 'Line one<br>Line two'

    def test_synopsis_writes_nbsp_as_entity(self):
        html = _detail_page(synopsis=False).replace(
            '</body>',
            '<div class="film-description"><div>Tokyo&nbsp;Jujutsu High &amp; more</div></div></body>',
        )
        assert parse_detail_page(html).synopsis == 'Tokyo&nbsp;Jujutsu High &amp; more'

    def test_synopsis_keeps_non_ascii_characters(self):
        html = _detail_page(synopsis=False).replace(
            '</body>',
            '<div class="film-description"><div>Sōsō no Frieren - “Beyond”</div></div></body>',
        )
        assert parse_detail_page(html).synopsis == 'Sōsō no Frieren - “Beyond”'

    def test_first_match_wins(self):
        html = _detail_page().replace(
            '</body>',
            '<h2 class="film-name dynamic-name">Second</h2></body>',
        )
        assert parse_detail_page(html).name == 'Frieren'

    def test_name_needs_both_classes(self):
        html = _detail_page(name=False).replace('</body>', '<h2 class="film-name">Only one</h2></body>')
        with pytest.raises(ExtractionError) as exc_info:
            parse_detail_page(html)
        assert exc_info.value.selector == NAME_SELECTOR

    @pytest.mark.parametrize('missing, selector', [
        ('name', NAME_SELECTOR),
        ('synopsis', SYNOPSIS_SELECTOR),
        ('poster', POSTER_SELECTOR),
    ])
    def test_missing_element_raises(self, missing, selector):
        with pytest.raises(ExtractionError) as exc_info:
            parse_detail_page(_detail_page(**{missing: False}))
        assert exc_info.value.selector == selector

    def test_poster_without_src_raises(self):
        with pytest.raises(ExtractionError) as exc_info:
            parse_detail_page(_detail_page(poster_src=None))
        assert exc_info.value.selector == POSTER_SELECTOR
        assert exc_info.value.attribute == 'src'

    def test_empty_document_raises(self):
        with pytest.raises(ExtractionError):
            parse_detail_page('')
