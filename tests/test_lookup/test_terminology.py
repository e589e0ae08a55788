import threading
import time

import pytest

from metar_decoder.exceptions import DecoderIOError
from metar_decoder.lookup import LookupTables, load_terminology_dictionary, get_lookup_tables


class TestLoadTerminologyDictionary:

    def test_reads_key_value_lines(self, tmp_path):
        path = tmp_path / 'dict.txt'
        path.write_text("# comment\nKT=knots\n\n+=heavy\nNOTE=a=b\nmalformed line\n", encoding='utf-8')

        entries = load_terminology_dictionary(path)

        assert entries == {'KT': 'knots', '+': 'heavy', 'NOTE': 'a=b'}

    def test_missing_file_raises_decoder_io_error(self, tmp_path):
        with pytest.raises(DecoderIOError):
            load_terminology_dictionary(tmp_path / 'missing.txt')

    def test_packaged_dictionary(self):
        entries = load_terminology_dictionary()

        assert entries['KT'] == 'knots'
        assert entries['SM'] == 'statute miles'
        assert entries['+'] == 'heavy'
        assert entries['-'] == 'light'
        assert entries['SH'] == 'showers'
        assert entries['RA'] == 'rain'
        # compound weather groups are decoded group by group
        assert 'SHRA' not in entries


class TestLookupTables:

    def test_terminology_is_loaded_lazily_once(self):
        calls = []

        def loader():
            calls.append(1)
            return {'KT': 'knots'}

        tables = LookupTables(loader=loader)
        assert not tables.is_loaded
        assert calls == []

        assert tables.lookup('KT') == 'knots'
        assert tables.lookup('XX') is None
        assert tables.is_loaded
        assert len(calls) == 1

    def test_terminology_is_read_only(self):
        tables = LookupTables.from_mapping({'KT': 'knots'})
        with pytest.raises(TypeError):
            tables.terminology['KT'] = 'other'

    def test_concurrent_first_access_loads_once(self):
        calls = []

        def slow_loader():
            calls.append(1)
            time.sleep(0.05)
            return {'KT': 'knots'}

        tables = LookupTables(loader=slow_loader)
        results = []

        def reader():
            results.append(dict(tables.terminology))

        threads = [threading.Thread(target=reader) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(calls) == 1
        assert results == [{'KT': 'knots'}] * 8

    def test_failed_load_can_be_retried(self, tmp_path):
        path = tmp_path / 'dict.txt'
        tables = LookupTables(dictionary_path=path)

        with pytest.raises(DecoderIOError):
            tables.lookup('KT')
        assert not tables.is_loaded

        path.write_text("KT=knots\n", encoding='utf-8')
        assert tables.lookup('KT') == 'knots'

    def test_runway_state_tables(self, tables):
        assert tables.runway_deposits['3'] == "Thin frost cover"
        assert tables.contamination_extents['9'] == "51% to 100%"
        assert tables.braking_actions['95'] == "action good"

    def test_shared_instance(self):
        assert get_lookup_tables() is get_lookup_tables()
