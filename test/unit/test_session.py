from . import *

from vimopts.options import OptionRegistry
from vimopts.session import Session


class TestSession(TestCase):
    def test_empty(self):
        session = Session('buffer1')
        self.assertEqual(session.options, {})
        self.assertEqual(repr(session), "<Session('buffer1')>")

    def test_independent(self):
        registry = OptionRegistry()
        registry.define('filetype', '', 'string', ['ft'])
        a, b = Session('a'), Session('b')

        registry.set('ft', 'python', a, {'scope': 'local'})
        registry.set('ft', 'c', b, {'scope': 'local'})
        self.assertEqual(a.options, {'filetype': {'value': 'python'}})
        self.assertEqual(b.options, {'filetype': {'value': 'c'}})
        self.assertEqual(registry.get('ft', a), 'python')
        self.assertEqual(registry.get('ft', b), 'c')
        self.assertEqual(registry.get('ft'), '')

    def test_plain_object(self):
        class Editor:
            def __init__(self):
                self.options = {}

        registry = OptionRegistry()
        registry.define('wrap', False, 'boolean')
        editor = Editor()
        registry.set('wrap', True, editor, {'scope': 'local'})
        self.assertEqual(editor.options, {'wrap': {'value': True}})
        self.assertIs(registry.get('wrap'), False)
