import hashlib
import logging
import math
import re
import time
from dataclasses import dataclass
from urllib.parse import urlparse

import requests
from django.conf import settings

from .exceptions import AssetFetchError

logger = logging.getLogger(__name__)

ASSET_TYPES = ('image', 'font', 'icon', 'document')

MIME_TO_EXTENSION = {
    'image/jpeg': '.jpg',
    'image/jpg': '.jpg',
    'image/png': '.png',
    'image/gif': '.gif',
    'image/webp': '.webp',
    'image/svg+xml': '.svg',
    'application/pdf': '.pdf',
    'text/plain': '.txt',
    'text/html': '.html',
    'text/css': '.css',
    'application/javascript': '.js',
    'application/json': '.json',
}

IMAGE_EXTENSIONS = ('.jpg', '.jpeg', '.png', '.gif', '.webp', '.svg')
IMG_SRC_RE = re.compile(r'<img[^>]+src="([^">]+)"')


@dataclass
class AssetInfo:
    id: str
    type: str
    filename: str
    original_url: str
    local_path: str
    size: int
    mime_type: str
    hash: str
    optimized: bool = False

    def to_dict(self):
        return {
            'id': self.id,
            'type': self.type,
            'filename': self.filename,
            'originalUrl': self.original_url,
            'localPath': self.local_path,
            'size': self.size,
            'mimeType': self.mime_type,
            'hash': self.hash,
            'optimized': self.optimized,
        }


@dataclass
class AssetProcessingOptions:
    optimize_images: bool = False
    max_image_width: int | None = None
    max_image_height: int | None = None
    image_quality: int | None = None
    convert_to_webp: bool = False
    generate_thumbnails: bool = False


def extension_for_mime_type(mime_type):
    return MIME_TO_EXTENSION.get(mime_type, '.bin')


def is_image_url(url):
    lower = url.lower()
    return (
        any(ext in lower for ext in IMAGE_EXTENSIONS)
        or 'image' in lower
        or 'photo' in lower
        or 'avatar' in lower
    )


class AssetManager:
    """Downloads and catalogs the images and fonts a portfolio refers to.

    Assets are keyed by the md5 of their source URL, so asking for the same
    URL twice only fetches it once.
    """

    def __init__(self, timeout=None, session=None):
        self.timeout = timeout if timeout is not None else settings.ASSET_FETCH_TIMEOUT
        self.http = session or requests
        self.assets = {}

    @staticmethod
    def generate_hash(value):
        return hashlib.md5(value.encode('utf-8')).hexdigest()

    def generate_filename(self, url, asset_type, mime_type):
        return f"{asset_type}_{self.generate_hash(url)[:8]}{extension_for_mime_type(mime_type)}"

    def optimize_image(self, content, mime_type, options):
        # No image library is wired in yet, only the output name changes.
        extension = '.webp' if options.convert_to_webp else extension_for_mime_type(mime_type)
        return content, f"optimized_{int(time.time() * 1000)}{extension}"

    def process_asset(self, url, asset_type, options=None):
        options = options or AssetProcessingOptions()
        asset_hash = self.generate_hash(url)
        if asset_hash in self.assets:
            return self.assets[asset_hash]

        try:
            response = self.http.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise AssetFetchError(url, str(e)) from e
        if not response.ok:
            raise AssetFetchError(url, response.reason or f"HTTP {response.status_code}")

        content = response.content
        mime_type = response.headers.get('content-type', 'application/octet-stream').split(';')[0].strip()
        filename = self.generate_filename(url, asset_type, mime_type)

        is_image = asset_type == 'image'
        if is_image and options.optimize_images:
            content, filename = self.optimize_image(content, mime_type, options)

        asset = AssetInfo(
            id=asset_hash,
            type=asset_type,
            filename=filename,
            original_url=url,
            local_path=f"assets/{asset_type}s/{filename}",
            size=len(content),
            mime_type='image/webp' if options.convert_to_webp and is_image else mime_type,
            hash=asset_hash,
            optimized=bool(options.optimize_images and is_image),
        )
        self.assets[asset_hash] = asset
        logger.debug("Processed asset %s -> %s", url, asset.local_path)
        return asset

    def extract_images_from_content(self, content, found):
        if isinstance(content, str):
            if '<img' in content:
                found.extend(IMG_SRC_RE.findall(content))
            elif is_image_url(content):
                found.append(content)
        elif isinstance(content, dict):
            for value in content.values():
                self.extract_images_from_content(value, found)
        elif isinstance(content, list):
            for value in content:
                self.extract_images_from_content(value, found)

    def collect_portfolio_image_urls(self, portfolio):
        urls = []
        sections = portfolio.get('sections') or []
        for section in sections:
            content = section.get('content')
            if not isinstance(content, dict):
                continue
            if section.get('type') == 'hero' and content.get('avatar'):
                urls.append(content['avatar'])
            if section.get('type') == 'projects' and isinstance(content.get('items'), list):
                for project in content['items']:
                    if isinstance(project, dict) and project.get('image'):
                        urls.append(project['image'])
        for section in sections:
            if section.get('content'):
                self.extract_images_from_content(section['content'], urls)
        return list(dict.fromkeys(urls))

    def process_portfolio_assets(self, portfolio, options=None):
        processed = []
        for url in self.collect_portfolio_image_urls(portfolio):
            try:
                processed.append(self.process_asset(url, 'image', options))
            except AssetFetchError as e:
                logger.warning("Failed to process asset %s: %s", url, e.reason)
        return processed

    def get_asset(self, asset_id):
        return self.assets.get(asset_id)

    def get_all_assets(self):
        return list(self.assets.values())

    def get_assets_by_type(self, asset_type):
        return [a for a in self.assets.values() if a.type == asset_type]

    def get_total_size(self):
        return sum(a.size for a in self.assets.values())

    def clear(self):
        self.assets.clear()

    @staticmethod
    def generate_font_css(fonts):
        return '\n'.join(
            f"@import url('https://fonts.googleapis.com/css2?family={font}:wght@300;400;500;600;700&display=swap');"
            for font in fonts
        )

    @staticmethod
    def generate_preload_links(critical_assets):
        links = []
        for asset in critical_assets:
            if asset.type == 'font':
                links.append(f'<link rel="preload" href="{asset.local_path}" as="font" crossorigin>')
            else:
                links.append(f'<link rel="prefetch" href="{asset.local_path}">')
        return '\n'.join(links)

    @staticmethod
    def update_content_paths(content, asset_map):
        for original_url, local_path in asset_map.items():
            content = content.replace(original_url, local_path)
        return content


def validate_asset_url(url):
    if not isinstance(url, str):
        return False
    parsed = urlparse(url)
    return bool(parsed.scheme) and bool(parsed.netloc or parsed.path)


def get_asset_type_from_url(url):
    lower = url.lower()
    if re.search(r'\.(jpg|jpeg|png|gif|webp|svg)$', lower):
        return 'image'
    if re.search(r'\.(woff|woff2|ttf|otf|eot)$', lower):
        return 'font'
    if re.search(r'\.(ico|png)$', lower) and 'icon' in lower:
        return 'icon'
    return 'document'


def format_file_size(size):
    if size == 0:
        return '0 Bytes'
    units = ['Bytes', 'KB', 'MB', 'GB']
    i = min(int(math.floor(math.log(size, 1024))), len(units) - 1)
    value = round(size / math.pow(1024, i), 2)
    return f"{value:g} {units[i]}"
