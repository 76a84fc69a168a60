import hashlib

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pqcrkit.symmetric import HashContext, algo_names, get_algo
from pqcrkit.xoesch import xoesch256, xoesch384

ALL = ["shake256", "xoesch256", "xoesch384"]


def test_algo_names():
    assert algo_names() == ALL


def test_unknown_algo():
    with pytest.raises(ValueError):
        get_algo("sha1")


def test_algo_properties():
    shake = get_algo("shake256")
    assert shake.long_ui_name == "SHAKE256"
    assert shake.max_seclevel_preimage_bytes == 64
    assert get_algo("xoesch256").max_seclevel_crhash_bytes == 32
    assert get_algo("xoesch384").short_ui_name == "XOEsch384"


def test_check_seclevel():
    algo = get_algo("xoesch384")
    assert algo.check_seclevel(48, 48)
    assert not algo.check_seclevel(49, 32)
    assert not algo.check_seclevel(32, 64)


@pytest.mark.parametrize(
    "context,byte",
    [
        (HashContext.MESSAGEHASH, 3),
        (HashContext.CHALLENGE2EXPAND, 9),
        (HashContext.INTERNAL_GENMSGHASHSALT, 0x80),
        (HashContext.INTERNAL_GENBLINDINGSEED, 0x82),
    ],
)
def test_context_byte_is_hashed_first(context, byte):
    out = get_algo("shake256").hasher(context).expand(16)
    assert out == hashlib.shake_256(bytes([byte])).digest(16)


def test_shake_xof_matches_hashlib():
    out = get_algo("shake256").xof([b"abc", b"", b"def"], 40)
    assert out == hashlib.shake_256(b"abcdef").digest(40)


def test_xoesch_xof_matches_hash_functions():
    assert get_algo("xoesch256").xof([b"hello ", b"world"], 50) == xoesch256(b"hello world", 50)
    assert get_algo("xoesch384").xof([b"x" * 20, b"y" * 17], 33) == xoesch384(b"x" * 20 + b"y" * 17, 33)


@pytest.mark.parametrize("name", ALL)
def test_hasher_starts_with_context_and_prefix(name):
    algo = get_algo(name)
    h = algo.hasher(HashContext.COMMITMENT, b"prefix")
    h.chunk(b"body")
    assert h.expand(24) == algo.xof([bytes([5]), b"prefix", b"body"], 24)


@pytest.mark.parametrize("name", ALL)
def test_index_is_little_endian(name):
    algo = get_algo(name)
    a = algo.hasher(HashContext.PUBPARAMS)
    a.index(0x01020304)
    b = algo.hasher(HashContext.PUBPARAMS)
    b.chunk(b"\x04\x03\x02\x01")
    assert a.expand(16) == b.expand(16)


@pytest.mark.parametrize("name", ALL)
def test_ui16vec_is_little_endian(name):
    algo = get_algo(name)
    a = algo.hasher(HashContext.CHALLENGE1HASH, b"p")
    a.ui16vec([0x0102, 0xFFFF, 0])
    b = algo.hasher(HashContext.CHALLENGE1HASH, b"p")
    b.chunk(b"\x02\x01\xff\xff\x00\x00")
    assert a.expand(20) == b.expand(20)


def test_ui16vec_rejects_large_values():
    h = get_algo("shake256").hasher(HashContext.PUBPARAMS)
    with pytest.raises(ValueError):
        h.ui16vec([0x10000])


def test_index_rejects_out_of_range():
    h = get_algo("xoesch256").hasher(HashContext.PUBPARAMS)
    with pytest.raises(ValueError):
        h.index(-1)


@pytest.mark.parametrize("context", [-1, 256])
def test_hasher_rejects_bad_context(context):
    with pytest.raises(ValueError):
        get_algo("shake256").hasher(context)


@pytest.mark.parametrize("name", ALL)
def test_expand_twice_fails(name):
    h = get_algo(name).hasher(HashContext.MESSAGEHASH)
    h.chunk(b"m")
    first = h.expand(8)
    assert len(first) == 8
    with pytest.raises(ValueError):
        h.expand(8)
    with pytest.raises(ValueError):
        h.chunk(b"more")


@pytest.mark.parametrize("name", ALL)
def test_copy_reuses_prefix_independently(name):
    algo = get_algo(name)
    base = algo.hasher(HashContext.EXPANDBLINDINGSEED, b"seed")
    base.index(7)
    branch = base.copy()
    branch.chunk(b"extra")
    plain = base.expand(32)
    extended = branch.expand(32)
    assert plain != extended
    fresh = algo.hasher(HashContext.EXPANDBLINDINGSEED, b"seed")
    fresh.index(7)
    assert fresh.expand(32) == plain


@pytest.mark.parametrize("name", ALL)
def test_different_contexts_differ(name):
    algo = get_algo(name)
    a = algo.hasher(HashContext.CHALLENGE1EXPAND).expand(16)
    b = algo.hasher(HashContext.CHALLENGE2EXPAND).expand(16)
    assert a != b


@pytest.mark.parametrize("name", ALL)
def test_xof_output_prefix_consistent(name):
    algo = get_algo(name)
    long = algo.xof([b"data"], 70)
    short = algo.xof([b"data"], 10)
    assert len(long) == 70
    assert long[:10] == short


@settings(max_examples=20, deadline=None)
@given(
    data=st.binary(max_size=80),
    cut=st.integers(min_value=0, max_value=80),
    name=st.sampled_from(ALL),
)
def test_chunk_boundaries_do_not_matter(data, cut, name):
    algo = get_algo(name)
    cut = min(cut, len(data))
    a = algo.hasher(HashContext.SECKEYCHECKSUM)
    a.chunk(data[:cut])
    a.chunk(data[cut:])
    b = algo.hasher(HashContext.SECKEYCHECKSUM, data)
    assert a.expand(32) == b.expand(32)