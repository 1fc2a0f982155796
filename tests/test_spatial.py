from spatial import BlockPos, NodePos, NEIGHBOR_OFFSETS


def test_block_pos_add():
    assert BlockPos(1, 2, 3) + BlockPos(-1, 0, 1) == BlockPos(0, 2, 4)
    assert BlockPos(1, 2, 3) + (1, 1, 1) == BlockPos(2, 3, 4)
    assert isinstance(BlockPos(0, 0, 0) + (1, 1, 1), BlockPos)


def test_block_to_node():
    assert BlockPos(1, -1, 2).toNodePos() == NodePos(16, -16, 32)


def test_node_to_block_and_local():
    pos = NodePos(-1, 5, 33)
    assert pos.toBlockPos() == BlockPos(-1, 0, 2)
    assert pos.localPos() == NodePos(15, 5, 1)


def test_neighbor_offsets():
    assert len(NEIGHBOR_OFFSETS) == 27
    assert len(set(NEIGHBOR_OFFSETS)) == 27
    assert BlockPos(0, 0, 0) in NEIGHBOR_OFFSETS
    for offset in NEIGHBOR_OFFSETS:
        assert all(-1 <= c <= 1 for c in offset)
