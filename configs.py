from utils import make_path, setup_logger

# mysql or sqlite
db_type = 'sqlite'

db_sqlite_path = make_path('bulk.db')

db_mysql_host = 'localhost'
db_mysql_user = 'root'
db_mysql_password = ''
db_mysql_database = 'bulk'
db_mysql_port = 3306

# prepended to every model table name e.g. 'prefix_' -> `prefix_users`
db_table_prefix = ''

# log every statement and its params
db_echo = False

# rows per statement, None sends the whole batch as one statement
# sqlite caps bound params at 32766 (999 on builds older than 3.32)
insert_batch_size = None


logger_name = 'bulkdb'
log_file = False # or make_path("bulkdb.log") if you want to log to files
MB_5 = 5 * 1024 * 1024
logger = setup_logger(logger_name, log_file=log_file, stdout=True, file_rotate_size=MB_5, max_files=3)
