"""
Pytest configuration and fixtures for Zoro scraper tests.
"""
import os
import sys

# Add project root to path for imports
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

import pytest


@pytest.fixture
def sample_search_html():
    """Return sample search page HTML with three result cards."""
    return '''
    <html>
    <head><title>Search results for "jujutsu" - Zoro</title></head>
    <body>
        <div class="block_area-content block_area-list film_list film_list-grid">
            <div class="film_list-wrap">
                <div class="flw-item">
                    <div class="film-poster">
                        <img data-src="https://img.zorores.com/_r/300x400/100/jjk.jpg" class="film-poster-img lazyload">
                        <a href="/watch/jujutsu-kaisen-tv-534" class="film-poster-ahref"></a>
                    </div>
                    <div class="film-detail">
                        <h3 class="film-name"><a href="/jujutsu-kaisen-tv-534?ref=search" title="Jujutsu Kaisen (TV)">Jujutsu Kaisen (TV)</a></h3>
                        <div class="fd-infor"><span class="fdi-item">TV</span></div>
                    </div>
                    <div class="clearfix"></div>
                </div>
                <div class="flw-item">
                    <div class="film-poster">
                        <a href="/watch/jujutsu-kaisen-0-movie-17763" class="film-poster-ahref"></a>
                    </div>
                    <div class="film-detail">
                        <h3 class="film-name"><a href="/jujutsu-kaisen-0-movie-17763?ref=search">Jujutsu Kaisen 0 Movie</a></h3>
                    </div>
                </div>
                <div class="flw-item">
                    <div class="film-poster">
                        <a href="/watch/jujutsu-kaisen-2nd-season-18413" class="film-poster-ahref"></a>
                    </div>
                    <div class="film-detail">
                        <h3 class="film-name"><a href="/jujutsu-kaisen-2nd-season-18413?ref=search">Jujutsu Kaisen 2nd Season</a></h3>
                    </div>
                </div>
            </div>
        </div>
    </body>
    </html>
    '''


@pytest.fixture
def sample_detail_html():
    """Return sample detail page HTML for testing."""
    return '''
    <html>
    <head><title>Watch Jujutsu Kaisen (TV) - Zoro</title></head>
    <body>
        <div class="anis-content">
            <div class="anisc-poster">
                <div class="film-poster">
                    <img src="https://img.zorores.com/_r/300x400/100/jjk.jpg" class="film-poster-img" alt="Jujutsu Kaisen (TV)">
                </div>
            </div>
            <div class="anisc-detail">
                <h2 class="film-name dynamic-name" data-jname="Jujutsu Kaisen (TV)">
                    Jujutsu Kaisen (TV)
                </h2>
                <div class="film-description m-hide">
                    <div class="text">
                        Idly indulging in baseless paranormal activities with the Occult Club.
                    </div>
                </div>
            </div>
        </div>
    </body>
    </html>
    '''
