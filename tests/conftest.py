"""Shared markup fixtures for the extraction tests"""
import pytest
from bs4 import BeautifulSoup

from caching import ParseCache
from configurations import ConfigFactory
from pipelines import MatchDataOrchestrator


LEAGUE_HTML = """
<div id="leagueList">
  <span onclick="CheckLeague(36)">Premier League[10]</span>
  <span onclick="CheckLeague(31)">La Liga[8]</span>
  <span onclick="CheckLeague(36)">Premier League[10]</span>
  <span onclick="CheckLeague(99)">Broken entry</span>
  <span onclick="other()">Serie A[6]</span>
</div>
"""

FIXTURE_HTML = """
<table id="table_live">
  <tr id="tr1_1">
    <td></td><td>Premier League</td><td>20:00</td><td>完</td>
    <td><a href="#">Arsenal</a> <span>[3]</span></td><td>2-1</td>
    <td><a href="#">Chelsea</a></td><td>1-0</td>
  </tr>
  <tr id="tr1_2">
    <td></td><td>La Liga</td><td>21:00</td><td>未</td>
    <td>Real Madrid</td><td></td><td>Barcelona</td><td></td>
  </tr>
  <tr id="tr1_3">
    <td>Premier League 2</td><td>22:00</td><td>中</td>
    <td>Leeds</td><td>0-0</td><td>Hull</td><td>0-0</td>
  </tr>
  <tr id="tr1_4"><td>short</td><td>row</td><td>only</td></tr>
  <tr id="tr2_5">
    <td></td><td>Ignored</td><td>23:00</td><td>完</td>
    <td>A</td><td>1-1</td><td>B</td><td>0-0</td>
  </tr>
</table>
"""

MATCH_HTML = """
<div class="analyhead">
  <div class="home"><a href="#">Arsenal</a></div>
  <div class="vs">
    <span class="LName">Premier League</span>
    <span class="time">2024-05-01 20:00</span>
    <span class="place">Emirates</span>
    <span class="score">2</span><span class="score">1</span>
    <span id="mState">90'</span>
    <label>天气：晴</label>
    <label>温度：18℃</label>
  </div>
  <div class="guest"><a href="#">Chelsea</a></div>
</div>
<div id="teamTechDiv">
  <div class="lists"><div class="data"><span>12</span><span>射门</span><span>8</span></div></div>
  <div class="lists"><div class="data"><span>60%</span><span>控球率</span><span>40%</span></div></div>
</div>
<div id="teamEventDiv">
  <div class="lists"><div class="data">
    <span><img src="/images/bf_img2/1.png" title="入球"/><a href="#">PlayerA</a><a href="#">(助攻:PlayerC)</a></span>
    <span>12'</span>
    <span></span>
  </div></div>
  <div class="lists"><div class="data">
    <span></span>
    <span>30'</span>
    <span><img src="/images/bf_img2/3.png"/><a href="#">李四</a></span>
  </div></div>
  <div class="lists"><div class="data">
    <span><img src="/images/bf_img2/11.png"/><a href="#">Saka</a><a href="#">Martinelli</a></span>
    <span>60'</span>
    <span></span>
  </div></div>
  <div class="lists"><div class="data"><span>x</span><span></span><span>y</span></div></div>
</div>
"""

GENERIC_HTML = """
<div class="content">
  <div class="lists"><div class="data"><span>7</span><span>射门</span><span>4</span></div></div>
  <div class="lists"><div class="data"><span>55%</span><span>控球率</span><span>45%</span></div></div>
  <div class="lists"><div class="data">
    <span><img src="/images/bf_img2/1.png"/><a href="#">PlayerA</a></span>
    <span>23'</span>
    <span></span>
  </div></div>
  <div class="lists"><div class="data">
    <span></span>
    <span>90+2'</span>
    <span><img src="/images/bf_img2/3.png"/><a href="#">PlayerB</a></span>
  </div></div>
</div>
"""

STATS_FRAGMENT_HTML = """
<div class="teamTechDiv">
  <div class="lists"><div class="data"><span>5</span><span>角球</span><span>3</span></div></div>
</div>
"""

EVENTS_FRAGMENT_HTML = """
<div class="teamtit"><div class="data">
  <span class="homeTN">Leeds<i>2</i></span>
  <span class="guestTN">Hull<i>1</i></span>
</div></div>
<div class="teamEventDiv">
  <div class="lists"><div class="data">
    <span><img src="/images/bf_img2/1.png"/><a href="#">Bamford</a></span>
    <span>44'</span>
    <span></span>
  </div></div>
</div>
"""


@pytest.fixture
def league_html():
    return LEAGUE_HTML


@pytest.fixture
def fixture_html():
    return FIXTURE_HTML


@pytest.fixture
def match_html():
    return MATCH_HTML


@pytest.fixture
def generic_html():
    return GENERIC_HTML


@pytest.fixture
def stats_fragment_html():
    return STATS_FRAGMENT_HTML


@pytest.fixture
def events_fragment_html():
    return EVENTS_FRAGMENT_HTML


@pytest.fixture
def settings():
    return ConfigFactory.testing()


@pytest.fixture
def cache():
    return ParseCache()


@pytest.fixture
def orchestrator(settings, cache):
    return MatchDataOrchestrator(settings, cache)


@pytest.fixture
def make_cell():
    """Build a single <span> cell from a markup snippet"""
    def _make_cell(markup: str):
        return BeautifulSoup(markup, "html.parser").find("span")
    return _make_cell
