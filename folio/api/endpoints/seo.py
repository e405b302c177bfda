from datetime import datetime, timezone
from xml.sax.saxutils import escape

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from folio.core.config import Settings
from folio.core.deps import get_post_service, get_app_settings
from folio.services.post_service import PostService

router = APIRouter()

FEED_CACHE_CONTROL = "public, max-age=3600"
RSS_ITEM_LIMIT = 50


def _rfc822(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%a, %d %b %Y %H:%M:%S GMT")


def _cdata(value: str) -> str:
    return "<![CDATA[" + value.replace("]]>", "]]]]><![CDATA[>") + "]]>"


@router.get("/sitemap.xml", response_class=Response)
def generate_sitemap(
    posts: PostService = Depends(get_post_service),
    settings: Settings = Depends(get_app_settings),
):
    """
    Genera el sitemap.xml del blog. Solo incluye posts publicados.
    """
    base_url = settings.SITE_URL.rstrip("/")

    sitemap_xml = '<?xml version="1.0" encoding="UTF-8"?>\n'
    sitemap_xml += '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'

    sitemap_xml += '  <url>\n'
    sitemap_xml += f'    <loc>{escape(base_url)}/blog</loc>\n'
    sitemap_xml += f'    <lastmod>{datetime.now(timezone.utc).strftime("%Y-%m-%d")}</lastmod>\n'
    sitemap_xml += '    <changefreq>daily</changefreq>\n'
    sitemap_xml += '    <priority>1.0</priority>\n'
    sitemap_xml += '  </url>\n'

    for post in posts.list_published():
        sitemap_xml += '  <url>\n'
        sitemap_xml += f'    <loc>{escape(f"{base_url}/blog/{post.slug}")}</loc>\n'
        last_mod = post.updated_at or post.published_at or post.created_at
        if last_mod:
            sitemap_xml += f'    <lastmod>{last_mod.strftime("%Y-%m-%d")}</lastmod>\n'
        sitemap_xml += '    <changefreq>weekly</changefreq>\n'
        sitemap_xml += '    <priority>0.8</priority>\n'
        sitemap_xml += '  </url>\n'

    sitemap_xml += '</urlset>'

    return Response(
        content=sitemap_xml.encode("utf-8"),
        media_type="application/xml",
        headers={"Cache-Control": FEED_CACHE_CONTROL},
    )


@router.get("/rss.xml", response_class=Response)
def get_rss_feed(
    posts: PostService = Depends(get_post_service),
    settings: Settings = Depends(get_app_settings),
):
    """
    Genera el RSS feed del blog con los últimos posts publicados.
    """
    base_url = settings.SITE_URL.rstrip("/")

    rss_xml = '<?xml version="1.0" encoding="UTF-8"?>\n'
    rss_xml += '<rss version="2.0" xmlns:atom="http://www.w3.org/2005/Atom">\n'
    rss_xml += '  <channel>\n'
    rss_xml += f'    <title>{escape(settings.SITE_TITLE)}</title>\n'
    rss_xml += f'    <link>{escape(base_url)}/blog</link>\n'
    rss_xml += f'    <description>{escape(settings.SITE_DESCRIPTION)}</description>\n'
    rss_xml += f'    <lastBuildDate>{_rfc822(datetime.now(timezone.utc))}</lastBuildDate>\n'

    for post in posts.list_published(limit=RSS_ITEM_LIMIT):
        link = escape(f"{base_url}/blog/{post.slug}")
        rss_xml += '    <item>\n'
        rss_xml += f'      <title>{_cdata(post.title)}</title>\n'
        rss_xml += f'      <link>{link}</link>\n'
        rss_xml += f'      <guid isPermaLink="true">{link}</guid>\n'
        if post.excerpt:
            rss_xml += f'      <description>{_cdata(post.excerpt)}</description>\n'
        for tag in post.tags or []:
            rss_xml += f'      <category>{_cdata(tag)}</category>\n'
        pub_date = post.published_at or post.created_at
        rss_xml += f'      <pubDate>{_rfc822(pub_date)}</pubDate>\n'
        rss_xml += '    </item>\n'

    rss_xml += '  </channel>\n'
    rss_xml += '</rss>'

    return Response(
        content=rss_xml.encode("utf-8"),
        media_type="application/rss+xml",
        headers={"Cache-Control": FEED_CACHE_CONTROL},
    )
