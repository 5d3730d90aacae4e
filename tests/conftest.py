import pytest

from substrate_decoder import substrate_decoder_client

TIMESTAMP_SET = {
    "call_index": "0x0300",
    "call_function": "set",
    "call_module": "Timestamp",
    "call_args": [{"name": "now", "type": "Moment", "value": 1600000000000}],
    "call_hash": "0x01",
}

PARAS_INHERENT_ENTER = {
    "call_index": "0x3600",
    "call_function": "enter",
    "call_module": "ParaInherent",
    "call_args": [{"name": "data", "type": "ParachainsInherentData", "value": {}}],
    "call_hash": "0x02",
}

BALANCES_TRANSFER = {
    "call_index": "0x0503",
    "call_function": "transfer_keep_alive",
    "call_module": "Balances",
    "call_args": [
        {"name": "dest", "type": "AccountIdLookupOf", "value": "1zugca"},
        {"name": "value", "type": "Balance", "value": 10000000000},
    ],
    "call_hash": "0x03",
}

STORAGE_FUNCTIONS = [
    {"module_name": "System", "storage_name": "Number", "type_keys": [], "type_value": "u32"},
    {
        "module_name": "System",
        "storage_name": "Account",
        "type_keys": ["AccountId32"],
        "type_value": "AccountInfo",
    },
    {
        "module_name": "Babe",
        "storage_name": "Authorities",
        "type_keys": [],
        "type_value": "WeakBoundedVec",
    },
    {
        "module_name": "ParaInclusion",
        "storage_name": "PendingAvailability",
        "type_keys": ["ParaId"],
        "type_value": "CandidatePendingAvailability",
    },
]

AUTHORITIES = [["0xd4e3", 1], ["0x8a1c", 1]]

ACCOUNTS = [
    ("15oF4uVJwmo4TdGW7VfQxNLavjCXviqxT9S1MgbjMNHr6Sp5", {"nonce": 0, "data": {"free": 1}}),
    ("13UVJyLnbVp9RBZYFwFGyDvVd1y27Tt8tkntv6Q7JVPhFsTB", {"nonce": 4, "data": {"free": 20}}),
    ("14E5nqKAp3oAJcmzgZhUD2RcptBeUBScxKHgJKU4HPNcKVf3", {"nonce": 2, "data": {"free": 300}}),
]

SPEC_VERSIONS = [0, 0, 0, 1, 1, 1, 1, 2, 3, 4, 4, 5]

METADATA = {"magicNumber": 1635018093, "metadata": {"V14": {"pallets": []}}}


class FakeScaleBytes:
    def __init__(self, data: bytes):
        self.data = data

    def to_hex(self):
        return f"0x{self.data.hex()}"


class FakeScaleObject:
    def __init__(self, value, data: bytes = b""):
        self.value = value
        self.data = FakeScaleBytes(data)


def extrinsic_bytes(call):
    return bytes.fromhex(call["call_index"][2:])


def block_hash_of(number):
    return f"0x{number:064x}"


class FakeSubstrate:
    """ Stands in for substrateinterface.SubstrateInterface, serving a tiny chain from memory. """

    def __init__(self):
        self.init_kwargs = None
        self.closed = False
        self.calls = []
        self.blocks = {
            5: [TIMESTAMP_SET, PARAS_INHERENT_ENTER, BALANCES_TRANSFER],
            6: [],
        }
        self.spec_versions = list(SPEC_VERSIONS)
        self.query_map_kwargs = None
        # Number of map entries served before a decoding error is raised.
        self.map_decode_error_after = None

    def __call__(self, **kwargs):
        self.init_kwargs = kwargs
        return self

    def close(self):
        self.closed = True

    def _known_numbers(self):
        return set(self.blocks) | set(range(len(self.spec_versions)))

    def get_block_hash(self, block_id=None):
        self.calls.append(("get_block_hash", block_id))
        if block_id in self._known_numbers():
            return block_hash_of(block_id)
        return None

    def get_block(self, block_hash=None, **kwargs):
        self.calls.append(("get_block", block_hash))
        calls = self.blocks[int(block_hash, 16)]
        return {
            "header": {"hash": block_hash},
            "extrinsics": [
                FakeScaleObject(
                    {"extrinsic_hash": call["call_hash"], "call": call},
                    extrinsic_bytes(call),
                )
                for call in calls
            ],
        }

    def get_metadata_storage_functions(self, block_hash=None):
        self.calls.append(("get_metadata_storage_functions", block_hash))
        return [dict(f) for f in STORAGE_FUNCTIONS]

    def query(self, module, storage_function, params=None, block_hash=None, **kwargs):
        self.calls.append(("query", module, storage_function, block_hash))
        if (module, storage_function) == ("Babe", "Authorities"):
            return FakeScaleObject(AUTHORITIES)
        if (module, storage_function) == ("System", "Number"):
            return FakeScaleObject(int(block_hash, 16))
        raise ValueError(f"Storage function {module}.{storage_function} not found")

    def query_map(self, module, storage_function, params=None, block_hash=None, max_results=None, **kwargs):
        self.calls.append(("query_map", module, storage_function, block_hash, max_results))
        self.query_map_kwargs = kwargs
        if (module, storage_function) == ("System", "Account"):
            pairs = ACCOUNTS
        else:
            pairs = []
        return self._iterate_map(pairs)

    def _iterate_map(self, pairs):
        for i, (key, value) in enumerate(pairs):
            if i == self.map_decode_error_after:
                raise ValueError("Decoding <AccountInfo> - No more bytes available")
            yield FakeScaleObject(key), FakeScaleObject(value)

    def get_block_metadata(self, block_hash=None, decode=True):
        self.calls.append(("get_block_metadata", block_hash))
        return FakeScaleObject(METADATA)

    def get_block_runtime_version(self, block_hash):
        self.calls.append(("get_block_runtime_version", block_hash))
        return {"specName": "polkadot", "specVersion": self.spec_versions[int(block_hash, 16)]}

    def get_chain_head(self):
        return block_hash_of(len(self.spec_versions) - 1)

    def get_block_number(self, block_hash):
        return int(block_hash, 16)


@pytest.fixture
def fake_substrate(monkeypatch):
    fake = FakeSubstrate()
    monkeypatch.setattr(substrate_decoder_client, "SubstrateInterface", fake)
    return fake


@pytest.fixture
def no_connection(monkeypatch):
    """ Fails the test if anything tries to connect to a node. """

    def connect(**kwargs):
        raise AssertionError(f"Unexpected connection with {kwargs}")

    monkeypatch.setattr(substrate_decoder_client, "SubstrateInterface", connect)
