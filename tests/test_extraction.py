"""
Tests for the image and link extraction module.
"""

import unittest

from image_spider.extraction.html_parser import extract_images_and_links


BASE = "https://site.example/gallery/index.html"


def _images(html: str) -> list[str]:
    return extract_images_and_links(html, BASE)[0]


def _links(html: str) -> list[str]:
    return extract_images_and_links(html, BASE)[1]


class TestImageExtraction(unittest.TestCase):
    def test_svg_rejected(self):
        self.assertEqual(_images('<img src="a.svg">'), [])

    def test_uppercase_extension_accepted(self):
        self.assertEqual(
            _images('<img src="a.JPG">'), ["https://site.example/gallery/a.JPG"]
        )

    def test_all_supported_extensions(self):
        html = "".join(
            f'<img src="/p.{ext}">' for ext in ("jpg", "jpeg", "png", "gif", "bmp", "webp")
        )
        self.assertEqual(len(_images(html)), 5)

    def test_data_url_rejected(self):
        html = '<img src="data:image/png;base64,iVBORw0KGgo.png">'
        self.assertEqual(_images(html), [])

    def test_data_url_rejected_any_case(self):
        self.assertEqual(_images('<img src=" DATA:image/jpeg;base64,xx.jpg">'), [])

    def test_relative_and_absolute_sources_resolved(self):
        html = """
        <img src="thumbs/1.png">
        <img src="/static/2.gif">
        <img src="https://cdn.example/3.jpeg">
        """
        self.assertEqual(_images(html), [
            "https://site.example/gallery/thumbs/1.png",
            "https://site.example/static/2.gif",
            "https://cdn.example/3.jpeg",
        ])

    def test_query_string_does_not_hide_extension(self):
        self.assertEqual(
            _images('<img src="/a.png?size=large">'),
            ["https://site.example/a.png?size=large"],
        )

    def test_img_without_src_ignored(self):
        self.assertEqual(_images('<img alt="missing">'), [])

    def test_responsive_class_element_matched(self):
        html = '<div class="img-responsive" src="/hero.jpg"></div>'
        self.assertEqual(_images(html), ["https://site.example/hero.jpg"])

    def test_second_responsive_class_matched(self):
        html = '<span class="card responsive-img" src="/card.png"></span>'
        self.assertEqual(_images(html), ["https://site.example/card.png"])

    def test_img_with_responsive_class_reported_once(self):
        html = '<img class="img-responsive" src="/once.bmp">'
        self.assertEqual(_images(html), ["https://site.example/once.bmp"])

    def test_duplicates_kept_in_document_order(self):
        html = '<img src="/b.png"><img src="/a.png"><img src="/b.png">'
        self.assertEqual(_images(html), [
            "https://site.example/b.png",
            "https://site.example/a.png",
            "https://site.example/b.png",
        ])

    def test_malformed_source_dropped(self):
        html = '<img src="http://[::1/x.png"><img src="/ok.png">'
        self.assertEqual(_images(html), ["https://site.example/ok.png"])


class TestLinkExtraction(unittest.TestCase):
    def test_cross_host_rejected(self):
        html = '<a href="https://other.example/x">x</a><a href="https://site.example/y">y</a>'
        self.assertEqual(_links(html), ["https://site.example/y"])

    def test_relative_links_resolved(self):
        html = '<a href="page2.html">2</a><a href="/about">about</a>'
        self.assertEqual(_links(html), [
            "https://site.example/gallery/page2.html",
            "https://site.example/about",
        ])

    def test_non_http_schemes_dropped(self):
        html = """
        <a href="mailto:me@site.example">mail</a>
        <a href="javascript:void(0)">js</a>
        <a href="tel:+123">call</a>
        """
        self.assertEqual(_links(html), [])

    def test_anchor_without_href_ignored(self):
        self.assertEqual(_links('<a name="top">top</a>'), [])

    def test_fragment_kept(self):
        self.assertEqual(_links('<a href="#top">top</a>'), [BASE + "#top"])

    def test_duplicate_links_kept(self):
        html = '<a href="/y">1</a><a href="/y">2</a>'
        self.assertEqual(_links(html), ["https://site.example/y"] * 2)

    def test_images_not_treated_as_links(self):
        images, links = extract_images_and_links('<img src="/a.png">', BASE)
        self.assertEqual(links, [])
        self.assertEqual(images, ["https://site.example/a.png"])


class TestMalformedHtml(unittest.TestCase):
    def test_broken_markup_still_parsed(self):
        html = '<html><body><img src="/a.png"<a href="/b">b</a><p><div>'
        images, links = extract_images_and_links(html, BASE)
        self.assertIsInstance(images, list)
        self.assertIsInstance(links, list)

    def test_empty_document(self):
        self.assertEqual(extract_images_and_links("", BASE), ([], []))


if __name__ == "__main__":
    unittest.main()
