"""Site-builder platform hints are detected once and only add passes."""

from __future__ import annotations

from qa_scanner import QAScanner
from qa_scanner.platform import NO_PLATFORM, detect_platform

WIX_BODY = (
    '<div data-wix-id="comp-1" data-wix-seo="1" data-wix-a11y="1"><h1>Hi</h1></div>'
    '<script src="https://static.wixstatic.com/app.js" async></script>'
)


def test_no_platform_for_plain_pages(page) -> None:
    assert detect_platform(page(body="<p>hi</p>")) is NO_PLATFORM
    assert not NO_PLATFORM.detected


def test_wix_detected_by_marker_with_features(page) -> None:
    hints = detect_platform(page(body=WIX_BODY, url="https://www.example.com/"))
    assert hints.is_platform("wix")
    assert hints.label == "Wix"
    assert not hints.on_vendor_domain
    assert hints.features == frozenset({"seo_panel", "a11y", "static_cdn"})


def test_wix_detected_by_domain(page) -> None:
    hints = detect_platform(page(body="<p>hi</p>", url="https://someone.wixsite.com/site"))
    assert hints.is_platform("wix")
    assert hints.on_vendor_domain
    assert hints.features == frozenset()


def test_platform_passes_are_added_per_category(page) -> None:
    report = QAScanner().run_scan(page(body=WIX_BODY, url="https://www.example.com/"))
    assert "Wix site detected" in report["seo"].passes
    assert "Wix SEO panel detected" in report["seo"].passes
    assert "Wix accessibility features detected" in report["accessibility"].passes
    assert "Wix site - performance optimizations handled by Wix" in report["performance"].passes
    assert "Wix static CDN detected" in report["performance"].passes
    assert "Wix SEO-friendly URL structure" in report["content"].passes
    assert "Wix site - managed platform" in report["bestPractices"].passes
    assert "Custom domain detected (good for SEO)" in report["bestPractices"].passes


def test_vendor_domain_has_no_custom_domain_pass(page) -> None:
    report = QAScanner().run_scan(page(body="<p>hi</p>", url="https://someone.wixsite.com/site"))
    assert "Wix site - managed platform" in report["bestPractices"].passes
    assert "Custom domain detected (good for SEO)" not in report["bestPractices"].passes


def test_tracking_url_is_reported_for_platform(page) -> None:
    report = QAScanner().run_scan(page(body="<p>hi</p>", url="https://someone.wixsite.com/site?__rc=abc"))
    assert "Wix URL may not be SEO-friendly (contains tracking params)" in [i.message for i in report["content"].issues]


def test_platform_never_suppresses_standard_checks(page) -> None:
    body = '<img src="a.png"><a href="#">x</a><input type="text"><div {marker}>content</div>'
    plain = QAScanner().run_scan(page(body=body.format(marker='class="c"'), url="https://www.example.com/"))
    wix = QAScanner().run_scan(page(body=body.format(marker='data-wix-id="c"'), url="https://www.example.com/"))
    for key, result in plain.categories.items():
        assert result.issues == wix[key].issues
        assert set(result.passes) <= set(wix[key].passes)
