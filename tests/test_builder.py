import unittest

from overloadkit.core.builder import OverloadGroup
from overloadkit.core.exceptions import ConfigurationError
from overloadkit.core.markers import Variadic
from overloadkit.utils.config import OverloadConfig

class TestOverloadGroup(unittest.TestCase):

    def setUp(self):
        self.group = OverloadGroup(name='sample')

    def test_exact_definitions_track_arity(self):
        self.group.define('number', lambda a: a)
        self.group.define('number', 'number', 'string', lambda a, b, c: c)
        self.group.define('string', lambda a: a)
        self.assertEqual(self.group.max_fixed_arity, 3)

    def test_variadic_definitions_skip_arity(self):
        key = self.group.define('string', Variadic('number'), lambda *args: args)
        self.assertEqual(key, '_$1$2')
        self.assertEqual(self.group.max_fixed_arity, 0)

    def test_keys(self):
        self.assertEqual(self.group.add(['number', 'number'], max), '_$1I2')
        self.assertEqual(self.group.add([Variadic('number')], sum), '_$1')

    def test_last_write_wins(self):
        self.group.define('number', lambda a: 'first')
        self.group.define('number', lambda a: 'second')
        self.assertEqual(self.group.finalize()(1), 'second')

    def test_handler_must_be_callable(self):
        with self.assertRaises(ConfigurationError):
            self.group.define('number', 'number')
        with self.assertRaises(ConfigurationError):
            self.group.define()

    def test_finalize_freezes(self):
        self.group.define('number', lambda a: a)
        dispatcher = self.group.finalize()
        self.assertTrue(self.group.finalized)
        self.assertTrue(self.group.registry.frozen)
        self.assertIs(self.group.finalize(), dispatcher)
        with self.assertRaises(ConfigurationError):
            self.group.define('string', lambda a: a)
        with self.assertRaises(TypeError):
            dispatcher.exact_table['_$1I1'] = print

    def test_tables_are_copied(self):
        self.group.define('number', lambda a: a)
        dispatcher = self.group.finalize()
        self.group._exact_table.clear()
        self.assertEqual(len(dispatcher.exact_table), 1)

    def test_custom_config(self):
        group = OverloadGroup(config=OverloadConfig(base_id=0, start_marker='@'))
        self.assertEqual(group.define('number', 'number', max), '@$0I2')

    def test_finalize_is_logged(self):
        self.group.define('number', lambda a: a)
        with self.assertLogs('overloadkit', level='INFO') as logs:
            self.group.finalize()
        self.assertTrue(any('Finalized overload group sample' in line for line in logs.output))

if __name__ == '__main__':
    unittest.main()
