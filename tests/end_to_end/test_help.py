import sys
from unittest.mock import patch

import pytest
from bedpesummary.main import main


class TestHelpMenu:
    def test_help(self, capsys):
        with patch.object(sys, 'argv', ['bedpesummary', '-h']):
            with pytest.raises(SystemExit) as err:
                main()
        assert err.value.code == 0
        assert '--input' in capsys.readouterr().out

    def test_version(self):
        with patch.object(sys, 'argv', ['bedpesummary', '--version']):
            with pytest.raises(SystemExit) as err:
                main()
        assert err.value.code == 0

    def test_unrecognized_argument(self, capsys):
        with patch.object(sys, 'argv', ['bedpesummary', '--bad_flag']):
            with pytest.raises(SystemExit) as err:
                main()
        assert err.value.code != 0
        captured = capsys.readouterr()
        assert 'usage' in captured.err
        assert captured.out == ''
