from nc_exporter.lib.fingerprint import metric_names_hash


def test_hash_of_known_name_set():
    names = [
        "nc_num_users",
        "nc_num_files",
        "nc_num_storages",
        "nc_num_storages_local",
        "nc_num_storages_home",
        "nc_num_storages_other",
    ]
    assert metric_names_hash(names) == 12094105


def test_hash_ignores_order_and_duplicates():
    names = ["nc_b", "nc_a", "nc_c"]
    assert metric_names_hash(names) == metric_names_hash(reversed(names))
    assert metric_names_hash(names) == metric_names_hash(names + ["nc_a"])


def test_hash_changes_with_name_set():
    base = ["nc_a", "nc_b"]
    assert metric_names_hash(base) != metric_names_hash(base + ["nc_c"])
    assert metric_names_hash(base) != metric_names_hash(["nc_a"])
    assert metric_names_hash(base) != metric_names_hash(["nc_a", "nc_bb"])


def test_hash_fits_in_three_bytes():
    assert metric_names_hash([]) == 13901196
    assert 0 <= metric_names_hash(["nc_nextcloud_system_cpuload"]) < 2 ** 24
