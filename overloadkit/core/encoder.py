'''
    Encoding of id sequences into the two lookup keys.

    A signature is split into maximal runs of equal consecutive ids. With the
    default markers, the ids (3, 3, 5) give

        exact key   _$3I2$5I1
        generic key _$3$5

    The generic key drops the run lengths, so every repetition count of a
    run maps to the same key.
'''

import re
from itertools import groupby

from overloadkit.utils.config import DEFAULT_CONFIG

class SignatureEncoder:

    def __init__(self, config=None):

        self._config = config or DEFAULT_CONFIG
        self._run_length = re.compile(re.escape(self._config.length_marker)+r'\d+')

    @staticmethod
    def runs(ids) -> list:
        '''
            Split a sequence of ids into maximal runs

            Args:
                ids (iterable of int): The type ids of a signature

            Returns:
                list: (id, run length) pairs, in order
        '''
        return [(type_id, sum(1 for _ in run)) for type_id, run in groupby(ids)]

    def encode_exact(self, ids) -> str:
        cfg = self._config
        tokens = [f'{type_id}{cfg.length_marker}{length}' for type_id, length in self.runs(ids)]
        return cfg.separator.join([cfg.start_marker, *tokens])

    def encode_generic(self, ids) -> str:
        cfg = self._config
        tokens = [str(type_id) for type_id, _ in self.runs(ids)]
        return cfg.separator.join([cfg.start_marker, *tokens])

    def strip_run_lengths(self, exact_key: str) -> str:
        '''
            Turn an exact key into the generic key of the same signature
        '''
        return self._run_length.sub('', exact_key)
