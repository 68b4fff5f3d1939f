"""Tests for template orchestration."""

from templatebind.bindings import BindingStore
from templatebind.template import HasBindings, Template
from templatebind.template.template import substitute_variables


class TestTemplate:
    """Test the Template orchestrator against a mocked processor."""

    def test_locates_bindings(self, processor_factory):
        """Test bindings are built from the processor's variables."""
        template = Template.load("basic_template.docx", processor_factory)

        assert template.template_path == "basic_template.docx"
        assert template.bindings.names() == {
            "values": ["name"],
            "tables": {"account": ["id", "name", "number"]},
            "blocks": {"customer": ["name", "address"]},
        }

    def test_fill_returns_template(self, processor_factory):
        template = Template.load("basic_template.docx", processor_factory)

        assert template.fill({"name": "John"}) is template
        assert template.bindings.values() == {"name": "John"}

    def test_populate_string(self, processor_factory):
        """Test scalar placeholders of a string are substituted."""
        template = Template.load("basic_template.docx", processor_factory)

        text = template.fill({"name": "John", "surname": "Wick"}).populate(
            "${name} ${surname}.docx"
        )

        # surname is not declared by the template
        assert text == "John .docx"

    def test_compile_drives_processor(self, processor_factory, structured_data):
        """Test compile substitutes values and clones rows and blocks."""
        template = Template.load("basic_template.docx", processor_factory)

        processor = template.fill(structured_data).compile()

        assert processor is processor_factory.processors[-1]
        assert len(processor_factory.processors) == 2
        processor.set_values.assert_called_once_with({"name": "John"})
        processor.clone_row_and_set_values.assert_called_once_with(
            "table__account.id",
            [
                {
                    "table__account.id": 1,
                    "table__account.name": "Jane",
                    "table__account.number": 123,
                }
            ],
        )
        processor.clone_block.assert_called_once_with(
            "block__customer",
            0,
            True,
            False,
            [{"block__customer.name": "Jim", "block__customer.address": "Shork st 4"}],
        )

    def test_compile_unfilled_uses_seed_rows(self, processor_factory):
        """Test an unfilled template still clones one blank row per group."""
        processor = Template.load("basic_template.docx", processor_factory).compile()

        processor.clone_row_and_set_values.assert_called_once_with(
            "table__account.id",
            [{"table__account.id": None, "table__account.name": None, "table__account.number": None}],
        )

    def test_compile_skips_table_without_columns(self, processor_factory, caplog):
        """Test a table with no anchor column is not cloned."""
        template = Template.load("basic_template.docx", processor_factory)
        template._bindings = BindingStore.init(
            {"values": ["name"], "tables": {"t": [], "account": ["id"]}, "blocks": {}}
        )

        processor = template.compile()

        processor.clone_row_and_set_values.assert_called_once_with(
            "table__account.id", [{"table__account.id": None}]
        )
        assert "Table 't' has no columns to clone rows from" in caplog.text


class TestSubstituteVariables:
    """Test plain string substitution."""

    def test_substitutes_known_values(self):
        assert substitute_variables("${a}-${b}", {"a": 1, "b": "x"}) == "1-x"

    def test_missing_and_none_become_empty(self):
        assert substitute_variables("[${a}][${b}]", {"a": None}) == "[][]"

    def test_text_without_placeholders(self):
        assert substitute_variables("plain {a} $a", {"a": 1}) == "plain {a} $a"


class Contract(HasBindings):
    """Object storing its template fields under a custom attribute."""

    field_storage = "placeholders"

    def __init__(self, placeholders):
        self.placeholders = placeholders


class Letter(HasBindings):
    def __init__(self, fields):
        self.fields = fields


class TestHasBindings:
    """Test the lazy bindings mixin."""

    def test_field_storage_key(self):
        """Test the storage key defaults to 'fields'."""
        contract = Contract([])
        assert contract.get_field_storage_key() == "placeholders"

        contract.field_storage = None
        assert contract.get_field_storage_key() == "fields"

    def test_bindings_from_custom_storage(self):
        contract = Contract(["name", "table__items.sku"])

        assert contract.bindings().names() == {
            "values": ["name"],
            "tables": {"items": ["sku"]},
            "blocks": {},
        }

    def test_bindings_are_cached(self):
        letter = Letter(["name"])

        first = letter.bindings()
        first.fill_values({"name": "John"})

        assert letter.bindings() is first
        assert letter.bindings().values() == {"name": "John"}

    def test_bindings_from_store(self):
        """Test a stored BindingStore is used as a sibling."""
        store = BindingStore.init(["key"]).fill_values({"key": "value"})
        letter = Letter(store)

        assert letter.bindings().names()["values"] == ["key"]
        assert letter.bindings().values() == {"key": None}
