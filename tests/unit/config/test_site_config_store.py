import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from shelfsite.config.exceptions import ConfigLoadError, ConfigNotFoundError
from shelfsite.config.model import DEFAULT_SHELVES, AppSettings, Shelf, SiteConfig
from shelfsite.config.store import ConfigStore
from shelfsite.storage.local import LocalStorageProvider


def test_scaffold_config_uses_empty_text_and_default_shelves():
    config = SiteConfig.scaffold()

    assert (config.site_title, config.site_subtitle, config.footer_text) == ("", "", "")
    assert [shelf.folder for shelf in config.shelves] == [
        "top-5-reads",
        "good-reads",
        "current-and-future-reads",
    ]


def test_config_document_is_camel_case():
    data = json.loads(SiteConfig.scaffold().to_json(2))

    assert set(data) == {"siteTitle", "siteSubtitle", "footerText", "shelves"}
    assert data["shelves"][0] == {"id": "top-5-reads", "label": "Top 5 Reads", "folder": "top-5-reads"}


def test_settings_document_shape():
    assert json.loads(AppSettings().to_json()) == {"libraryPath": None}
    assert json.loads(AppSettings(library_path=Path("/x/site")).to_json()) == {"libraryPath": "/x/site"}


def test_shelf_is_immutable():
    shelf = DEFAULT_SHELVES[0]
    with pytest.raises(ValidationError):
        shelf.folder = "renamed"


def test_save_and_load_round_trip_on_disk(tmp_path: Path):
    store = ConfigStore(LocalStorageProvider())
    config = SiteConfig(
        site_title="My Books",
        shelves=[Shelf(id="fav", label="Favourites", folder="favourites")],
    )

    path = store.save(tmp_path, config)

    assert path == tmp_path / "config.json"
    assert path.read_text(encoding="utf-8").endswith("}\n")
    assert store.load(tmp_path) == config


def test_load_missing_config_raises_not_found(tmp_path: Path):
    with pytest.raises(ConfigNotFoundError) as exc_info:
        ConfigStore(LocalStorageProvider()).load(tmp_path)
    assert exc_info.value.path == tmp_path / "config.json"


@pytest.mark.parametrize("folder", ["../../outside", "/etc", "a/b", "..", ".", "nested\\dir"])
def test_shelf_folder_must_be_a_single_name(folder: str):
    with pytest.raises(ValidationError):
        Shelf(id="x", label="X", folder=folder)


def test_config_with_escaping_shelf_folder_fails_to_load(tmp_path: Path):
    document = {"shelves": [{"id": "x", "label": "X", "folder": "../../outside"}]}
    (tmp_path / "config.json").write_text(json.dumps(document), encoding="utf-8")

    with pytest.raises(ConfigLoadError):
        ConfigStore(LocalStorageProvider()).load(tmp_path)


@pytest.mark.parametrize("content", ["{not json", '{"shelves": [{"id": ""}]}'])
def test_load_invalid_config_raises_load_error(tmp_path: Path, content: str):
    (tmp_path / "config.json").write_text(content, encoding="utf-8")

    with pytest.raises(ConfigLoadError):
        ConfigStore(LocalStorageProvider()).load(tmp_path)


def test_update_metadata_trims_and_keeps_shelves(memory_storage, memory_site):
    store = ConfigStore(memory_storage)

    updated = store.update_metadata(memory_site, site_title="  My Books ", footer_text="\tfooter\n")

    assert updated.site_title == "My Books"
    assert updated.footer_text == "footer"
    assert updated.site_subtitle == ""
    assert tuple(updated.shelves) == DEFAULT_SHELVES
    assert store.load(memory_site) == updated
