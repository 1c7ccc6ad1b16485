from payreport.privacy.provider import COMPONENT, MetadataCollection, Provider


class TestPrivacyProvider:
    def test_get_reason(self, strings):
        collection = MetadataCollection(COMPONENT)
        reason = Provider.get_reason(collection)

        assert reason == "privacy:metadata"
        assert "plugin does not store any personal data" in strings.get_string(reason, COMPONENT)

    def test_metadata_declares_nothing(self):
        collection = MetadataCollection(COMPONENT)
        result = Provider.get_metadata(collection)

        assert result is collection
        assert result.items == []
