import threading

from receipt_points.store import ReceiptStore


def test_put_then_get(make_receipt):
	store = ReceiptStore()
	receipt = make_receipt(retailer="Target")
	store.put("abc", receipt, 42)

	assert store.get_points("abc") == 42
	assert store.get_receipt("abc") is receipt
	assert "abc" in store
	assert len(store) == 1


def test_unknown_id_is_absent():
	store = ReceiptStore()
	assert store.get_points("missing") is None
	assert store.get_receipt("missing") is None
	assert "missing" not in store


def test_put_overwrites_existing_id(make_receipt):
	store = ReceiptStore()
	first, second = make_receipt(retailer="A"), make_receipt(retailer="B")
	store.put("same", first, 1)
	store.put("same", second, 2)

	assert store.get_points("same") == 2
	assert store.get_receipt("same") is second
	assert len(store) == 1


def test_stores_are_independent(make_receipt):
	a, b = ReceiptStore(), ReceiptStore()
	a.put("x", make_receipt(), 5)
	assert b.get_points("x") is None


def test_concurrent_puts_and_reads(make_receipt):
	store = ReceiptStore()
	receipt = make_receipt()
	n_threads, per_thread = 8, 200
	seen_torn = []

	def writer(t):
		for i in range(per_thread):
			store.put(f"{t}-{i}", receipt, i)

	def reader():
		for i in range(per_thread):
			# receipt and points are written together under one lock
			if store.get_points(f"0-{i}") is not None and store.get_receipt(f"0-{i}") is None:
				seen_torn.append(i)

	threads = [threading.Thread(target=writer, args=(t,)) for t in range(n_threads)]
	threads.append(threading.Thread(target=reader))
	for th in threads:
		th.start()
	for th in threads:
		th.join()

	assert len(store) == n_threads * per_thread
	assert store.get_points("7-199") == 199
	assert not seen_torn
