REPORTER_STATUSES = ('mahasiswa', 'dosen', 'tendik', 'foreign_student', 'lainnya')

# Static category list, seeded into the categories table by `flask seed-categories`
CATEGORIES = [
    {'id': 1, 'name': 'Elektronik (HP, Laptop, Kamera)'},
    {'id': 2, 'name': 'Dokumen (KTP, KTM, SIM, STNK)'},
    {'id': 3, 'name': 'Dompet/Tas'},
    {'id': 4, 'name': 'Kunci/Aksesoris'},
    {'id': 5, 'name': 'Pakaian/Sepatu'},
    {'id': 6, 'name': 'Lainnya'},
]

NAME_LIMIT = 150
STATUS_LIMIT = 30
ID_NUMBER_LIMIT = 255
CONTACT_LIMIT = 255
PHONE_PREFIX = '08'
PHONE_MAX_LENGTH = 13
ACCESS_TOKEN_LENGTH = 10
ALLOWED_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp'}

GENERAL_ERROR_MESSAGE = "Gagal menyimpan laporan."
