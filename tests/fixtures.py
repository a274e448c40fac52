"""Inline markup samples shaped like the site's listing, series and episode pages."""

import base64


def encode_mirror(fragment):
    return base64.b64encode(fragment.encode("utf-8")).decode("ascii")


def card(slug, title, score="", epx="", status="", img_attr="src", href=None):
    href = href or f"https://anichin.cafe/seri/{slug}/"
    score_html = f'<div class="rating"><strong>{score}</strong></div>' if score else ""
    status_html = f'<div class="status">{status}</div>' if status else ""
    epx_html = f'<span class="epx">{epx}</span>' if epx else ""
    return f"""
    <article class="bs">
      <div class="bsx">
        <a href="{href}" title="{title}">
          <div class="limit">{status_html}{epx_html}
            <img {img_attr}="https://anichin.cafe/wp-content/uploads/{slug}.jpg" alt="{title}">
          </div>
          <div class="tt"><h2>{title}</h2></div>
        </a>
        {score_html}
      </div>
    </article>
    """


def listing_page(*cards):
    return f"<html><body><div class='listupd'>{''.join(cards)}</div></body></html>"


DETAIL_PAGE = """
<html>
<head><meta property="og:image" content="https://anichin.cafe/og/soul-land.jpg"></head>
<body>
  <div class="bigcontent">
    <div class="thumb"><img src="/wp-content/uploads/soul-land.jpg"></div>
    <div class="infox">
      <h1 class="entry-title">Soul Land 2</h1>
      <div class="rating"><strong>Rating 8.70</strong></div>
      <div class="info-content">
        <div class="spe">
          <span><b>Status:</b> Ongoing</span>
          <span><b>Studio:</b> Sparkly Key</span>
          <span><b>Network:</b> Tencent&nbsp;Video</span>
          <span><b>Released on:</b> Jun 24, 2023</span>
          <span><b>Duration:</b> 20 min. per ep.</span>
          <span><b>Episodes:</b> 52</span>
          <span><b>Studio:</b> Sparkly Key Animation</span>
          <span><b>Empty:</b></span>
        </div>
      </div>
      <div class="genxed"><a href="/genres/action/">Action</a><a href="/genres/adventure/">Adventure</a><a href="#"> </a></div>
    </div>
  </div>
  <div class="bixbox synp"><div class="entry-content"><p>Tang   San returns
  to the continent.</p></div></div>
  <div class="eplister">
    <ul>
      <li><a href="https://anichin.cafe/soul-land-2-episode-3/">
        <div class="epl-num">3</div><div class="epl-title">Soul Land 2 Episode 3</div>
        <div class="epl-date">Coming Soon</div></a></li>
      <li><a href="https://anichin.cafe/soul-land-2-episode-2/">
        <div class="epl-num">2</div><div class="epl-title">Soul Land 2 Episode 2</div>
        <div class="epl-date">July 1, 2023</div></a></li>
      <li><a href="https://anichin.cafe/seri/soul-land-2/">
        <div class="epl-title">Not an episode</div></a></li>
      <li><a href="/soul-land-2-episode-1/"><div class="epl-num">1</div></a></li>
    </ul>
  </div>
</body>
</html>
"""

DETAIL_PAGE_LATEST_ONLY = """
<html><body>
  <div class="single-info"><div class="thumb"><img src="//cdn.anichin.cafe/cover.jpg"></div></div>
  <h1 class="entry-title">Renegade Immortal</h1>
  <div class="info-content"><div class="desc">A mortal walks the path of immortality.</div></div>
  <div class="lastend">
    <div class="inepcx"><a href="https://anichin.cafe/renegade-immortal-episode-60/"><span>Episode 60</span></a></div>
  </div>
</body></html>
"""

DETAIL_PAGE_NO_EPISODES = """
<html><body><h1 class="entry-title">Empty Series</h1><div class="eplister"><ul></ul></div></body></html>
"""

DETAIL_PAGE_NO_TITLE = """
<html><body><div class="eplister"><ul><li><a href="/x-episode-1/">Episode 1</a></li></ul></div></body></html>
"""


def stream_page(mirror_values=(), primary="", downloads="", nav=""):
    options = "".join(f'<option value="{value}">Mirror</option>' for value in mirror_values)
    primary_html = f'<div id="pembed"><iframe src="{primary}"></iframe></div>' if primary else ""
    return f"""
    <html><body>
      <h1 class="entry-title">Soul Land 2 Episode 2</h1>
      {primary_html}
      <select class="mirror"><option value="">Select Video Server</option>{options}</select>
      {downloads}
      {nav}
    </body></html>
    """


DOWNLOADS = """
<div class="soraddlx">
  <div class="soraurlx"><strong>360p</strong>
    <a href="https://mega.nz/file/a">Mega</a><a href="https://mega.nz/file/a">Mega again</a>
  </div>
  <div class="soraurlx"><strong>720p</strong><a href="https://terabox.com/s/b">Terabox</a></div>
  <div class="soraurlx"><strong>1080p</strong><a href="">Broken</a></div>
  <div class="soraurlx"><a href="/dl/default">Default link</a></div>
  <div class="soraurlx"><strong>360p</strong><a href="https://gofile.io/d/c">Gofile</a></div>
</div>
"""

NAV = """
<div class="naveps bignav">
  <div class="nvs"><a href="https://anichin.cafe/soul-land-2-episode-1/" rel="prev">Prev</a></div>
  <div class="nvs nvsc"><a href="https://anichin.cafe/seri/soul-land-2/">All Episodes</a></div>
  <div class="nvs"><a href="https://anichin.cafe/soul-land-2-episode-3/" rel="next">Next</a></div>
</div>
"""

DETAIL_PAGE_SERIES_LINKS_ONLY = """
<html><body>
  <h1 class="entry-title">Swallowed Star</h1>
  <div class="single-info"><span class="rating"><strong>Rating 9,1</strong></span></div>
  <div class="eplister">
    <ul>
      <li><a href="https://anichin.cafe/seri/swallowed-star/"><div class="epl-title">Series page</div></a></li>
      <li><a href="/seri/swallowed-star/"><div class="epl-title">Again</div></a></li>
    </ul>
  </div>
  <div class="lastend">
    <div class="inepcx"><a href="https://anichin.cafe/swallowed-star-episode-140/">Episode 140</a></div>
  </div>
</body></html>
"""

BREADCRUMB_NAV = """
<div class="naveps">
  <div class="nvs"><a href="https://anichin.cafe/swallowed-star-episode-139/" rel="prev">Prev</a></div>
  <div class="nvs"><span class="nolink">Next</span></div>
</div>
<div class="ts-breadcrumb">
  <a href="https://anichin.cafe/">Home</a>
  <a href="https://anichin.cafe/seri/swallowed-star/">Swallowed Star</a>
</div>
"""
