import datetime

import pytest


def programme_lines(start, end, path, title):
    """Markup lines for one programme as found on the at a glance page"""
    lines = []
    if start is not None:
        lines.append(
            f'    <span class="starttime">{start}</span><span class="endtime">&#8211;{end}</span>'
        )
    if path is not None:
        lines.append(f'    <a class="url" href="{path}">')
    if title is not None:
        lines.append(f'      <span class="title">{title}</span>')
    return lines


def make_markup(*programmes):
    lines = ["<html>", "<body>", '<div class="listings">']
    for programme in programmes:
        lines.extend(programme_lines(*programme))
        lines.append("")
    lines.extend(["</div>", "</body>", "</html>"])
    return "\n".join(lines)


@pytest.fixture
def markup():
    return make_markup


@pytest.fixture
def fixed_today():
    return lambda: datetime.date(2011, 4, 7)


class FakeFetcher:
    """Records fetched URLs and returns canned markup"""

    def __init__(self, content="", error=None):
        self.content = content
        self.error = error
        self.urls = []

    def fetch(self, url):
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.content

    def close(self):
        pass


@pytest.fixture
def fake_fetcher():
    return FakeFetcher
