# storekeeper

This is a small terminal program, run from menus, that keeps a shop's product list.
Each product has a code, a name and a price. The menus and messages are in
Indonesian.

## Installing

    pip install .

## Running

    storekeeper

The command takes no options other than `--help`. It works in the current
directory:

- `data.csv` holds the products in stock.
- `remove.csv` holds the products that have been removed.

Each line of these files is `code,name,price`. The price is written with six
significant digits. If a file does not exist yet, it counts as an empty list.
In that case the message `Failed to open file.` is printed on standard error.
Adding a product appends a line to `data.csv` and creates the file if it is
missing. Lines that lack a field are skipped when the files are read.

The program stops when you choose **exit**, at the end of input, or when you
press Ctrl-C.

## Menus

The main menu offers:

1. **Input Produk** adds a product. It asks for the code, the name and the
   price. The code is one word and must not already be in use. The name is the
   rest of the line. The price must start with a number.
2. **Tampil Produk** shows every product and then opens **OPSI LANJUTAN**,
   which offers these entries:
   - **Filter**, with two ways to search:
     - **BERDASARKAN KODE** shows the product with exactly the code you type.
     - **BERDASARKAN NAMA** lists the products whose names start with the
       text you type.
   - **Sort** lists the products by name, ascending or descending.
   - **Kembali** goes back.
3. **Hapus Produk** lists the products and removes the one whose code you
   type. The removed product is written to `remove.csv` and dropped from
   `data.csv`.
4. **History** shows the removed products in one of three orders of the
   name-ordered tree that holds them: in-order, post-order or pre-order.
5. **exit** leaves the program.

To pick an entry, type its number. The program says why and asks again in
these cases:

- the input is not made only of digits;
- the number is outside the menu.

Products are indexed by name for sorting, name filtering and the history.
Only one product per name is kept in these views. A second product with the
same name still shows in the full list, but not in the sorted or filtered
lists.

## Using it as a library

The product store can also be used from code:

    from storekeeper.product import Product
    from storekeeper.repository import ProductRepositoryImpl

    repo = ProductRepositoryImpl("data.csv", "remove.csv")
    repo.insert(Product("P01", "Sabun", 4500.0))
    for product in repo.get_all_sort_name(True):
        print(product.code, product.name, product.price)

    repo.get_by_code("P01")      # the product, or None
    repo.get_by_name("Sab")      # products whose names start with "Sab"
    repo.remove("P01")           # True if the code existed
    repo.history().inorder()     # removed products ordered by name

These modules make up the rest of the package:

- `storekeeper.avl.AvlTree` is the balanced tree ordered by name. It has
  `insert`, `delete`, `search`, `inorder`, `preorder`, `postorder` and
  `search_prefix`.
- `storekeeper.storage.ProductFileHandler` reads and writes the CSV files.
- `storekeeper.constraints` holds the input checks used by the menus.

## Tests

    pip install .[test]
    pytest