from tests.fakes.fake_metadata_provider import FakeMetadataProvider
from tests.fakes.fake_vault_provider import FakeVaultProvider

__all__ = ["FakeMetadataProvider", "FakeVaultProvider"]
