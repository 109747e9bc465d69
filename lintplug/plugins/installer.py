"""Download and installation of plugin releases from GitHub."""

import hashlib
import io
import os
import platform
import zipfile
from pathlib import Path
from typing import Dict, Optional, Tuple
import requests

from lintplug.errors import PluginInstallError
from lintplug.models import InstallConfig, Settings, get_settings
from lintplug.plugins.locator import PluginLocator
from lintplug.utils import get_logger

logger = get_logger(__name__)

CHECKSUMS_ASSET = "checksums.txt"

_ARCH_ALIASES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "i386": "386",
    "i686": "386",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv7l": "arm",
}


def platform_pair() -> Tuple[str, str]:
    """
    Get the OS and architecture names used in release asset names.

    Returns:
        (os, arch) tuple, e.g. ("linux", "amd64")
    """
    machine = platform.machine().lower()
    return platform.system().lower(), _ARCH_ALIASES.get(machine, machine)


def parse_checksums(text: str) -> Dict[str, str]:
    """
    Parse a ``sha256sum`` style checksum file.

    Args:
        text: File content, one ``<hex digest>  <file name>`` per line

    Returns:
        Mapping of file name to lowercase hex digest
    """
    checksums = {}
    for line in text.splitlines():
        fields = line.split()
        if len(fields) != 2:
            continue
        digest, filename = fields
        checksums[filename.lstrip("*")] = digest.lower()
    return checksums


class PluginInstaller:
    """Installs plugin binaries published as GitHub release assets."""

    def __init__(
        self,
        locator: Optional[PluginLocator] = None,
        settings: Optional[Settings] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize plugin installer.

        Args:
            locator: Locator deciding where binaries are written
            settings: Settings with API URL, token and timeout
            session: HTTP session (a new one by default)
        """
        self.locator = locator or PluginLocator()
        self.settings = settings or get_settings()
        self.timeout = self.settings.request_timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": self.settings.user_agent})

    def install(self, install_config: InstallConfig) -> Path:
        """
        Download, verify and extract a plugin release.

        Args:
            install_config: Plugin with source and version set

        Returns:
            Path to the installed binary

        Raises:
            PluginInstallError: If any step fails
        """
        if install_config.is_manually_managed():
            raise PluginInstallError(
                f'plugin "{install_config.name}" has no source or version', install_config.name
            )

        release = self._fetch_release(install_config)
        assets = {asset["name"]: asset for asset in release.get("assets", [])}

        os_name, arch = platform_pair()
        asset_name = install_config.asset_name(os_name, arch)

        for required in (CHECKSUMS_ASSET, asset_name):
            if required not in assets:
                raise PluginInstallError(
                    f"{required} not found in the {install_config.tag_name()} release "
                    f"of {install_config.source}",
                    install_config.name,
                )

        checksums = parse_checksums(
            self._download(assets[CHECKSUMS_ASSET], install_config).decode("utf-8", "replace")
        )
        if asset_name not in checksums:
            raise PluginInstallError(
                f"{asset_name} is not listed in {CHECKSUMS_ASSET}", install_config.name
            )

        archive = self._download(assets[asset_name], install_config)
        digest = hashlib.sha256(archive).hexdigest()
        if digest != checksums[asset_name]:
            raise PluginInstallError(
                f"checksum mismatch for {asset_name}: expected {checksums[asset_name]}, got {digest}",
                install_config.name,
            )

        path = self.locator.install_path(install_config)
        self._extract(archive, install_config, path)

        logger.info(f'Installed plugin "{install_config.name}" to {path}')
        return path

    def _fetch_release(self, install_config: InstallConfig) -> dict:
        url = (
            f"{self.settings.github_api_url.rstrip('/')}/repos/"
            f"{install_config.owner}/{install_config.repo}/releases/tags/{install_config.tag_name()}"
        )
        logger.debug(f"Fetching release metadata: {url}")

        try:
            response = self.session.get(url, headers=self._api_headers(), timeout=self.timeout)
        except requests.RequestException as e:
            raise PluginInstallError(f"failed to fetch release: {e}", install_config.name) from e

        if response.status_code == 404:
            raise PluginInstallError(
                f"release {install_config.tag_name()} not found in {install_config.source}",
                install_config.name,
            )
        if response.status_code != 200:
            raise PluginInstallError(
                f"failed to fetch release: GitHub API returned HTTP {response.status_code}",
                install_config.name,
            )

        return response.json()

    def _download(self, asset: dict, install_config: InstallConfig) -> bytes:
        url = asset.get("browser_download_url")
        if not url:
            raise PluginInstallError(f"asset {asset.get('name')} has no download URL", install_config.name)

        logger.debug(f"Downloading {url}")
        try:
            response = self.session.get(url, headers=self._api_headers(), timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise PluginInstallError(f"failed to download {asset['name']}: {e}", install_config.name) from e

        return response.content

    def _extract(self, archive: bytes, install_config: InstallConfig, path: Path) -> None:
        binary_name = install_config.binary_name

        try:
            with zipfile.ZipFile(io.BytesIO(archive)) as zf:
                member = next(
                    (info for info in zf.infolist() if Path(info.filename).name == binary_name),
                    None,
                )
                if member is None:
                    raise PluginInstallError(
                        f"{binary_name} not found in the release archive", install_config.name
                    )
                data = zf.read(member)
        except zipfile.BadZipFile as e:
            raise PluginInstallError(f"invalid release archive: {e}", install_config.name) from e

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = path.with_name(path.name + ".tmp")
            tmp_path.write_bytes(data)
            tmp_path.chmod(0o755)
            os.replace(tmp_path, path)
        except OSError as e:
            raise PluginInstallError(f"failed to write {path}: {e}", install_config.name) from e

    def _api_headers(self) -> Dict[str, str]:
        if self.settings.github_token:
            return {"Authorization": f"Bearer {self.settings.github_token}"}
        return {}
