# -*- coding: utf-8 -*-
"""Patrones para lenguajes de scripting/datos: R, Python, SQL, shell, Julia."""
from .base import table

R = table(
    input=[
        # base R
        (r"read\.csv\s*\(", "read.csv", "Base R CSV reader"),
        (r"read\.csv2\s*\(", "read.csv2", "Base R CSV reader (semicolon separated)"),
        (r"read\.table\s*\(", "read.table", "Base R table reader"),
        (r"read\.delim\s*\(", "read.delim", "Base R tab-delimited reader"),
        (r"readLines\s*\(", "readLines", "Base R line reader"),
        (r"readRDS\s*\(", "readRDS", "Base R RDS reader"),
        (r"load\s*\(", "load", "Base R RData loader"),
        (r"scan\s*\(", "scan", "Base R scanner"),
        # readr
        (r"read_csv\s*\(", "read_csv", "readr CSV reader"),
        (r"read_csv2\s*\(", "read_csv2", "readr CSV reader (semicolon separated)"),
        (r"read_tsv\s*\(", "read_tsv", "readr TSV reader"),
        (r"read_delim\s*\(", "read_delim", "readr delimited reader"),
        (r"read_fwf\s*\(", "read_fwf", "readr fixed-width reader"),
        (r"read_rds\s*\(", "read_rds", "readr RDS reader"),
        (r"fread\s*\(", "fread", "data.table fast reader"),
        # excel / json / columnar
        (r"read_excel\s*\(", "read_excel", "readxl Excel reader"),
        (r"read_xlsx\s*\(", "read_xlsx", "readxl XLSX reader"),
        (r"read_xls\s*\(", "read_xls", "readxl XLS reader"),
        (r"read\.xlsx\s*\(", "read.xlsx", "openxlsx Excel reader"),
        (r"fromJSON\s*\(", "fromJSON", "jsonlite JSON reader"),
        (r"read_json\s*\(", "read_json", "jsonlite JSON reader (file)"),
        (r"read_parquet\s*\(", "read_parquet", "arrow Parquet reader"),
        (r"read_feather\s*\(", "read_feather", "arrow Feather reader"),
        (r"read_sav\s*\(", "read_sav", "haven SPSS reader"),
        (r"read_sas\s*\(", "read_sas", "haven SAS reader"),
        (r"read_dta\s*\(", "read_dta", "haven Stata reader"),
        (r"read_xml\s*\(", "read_xml", "xml2 XML reader"),
        (r"read_html\s*\(", "read_html", "xml2 HTML reader"),
        (r"read_yaml\s*\(", "read_yaml", "yaml YAML reader"),
        (r"yaml\.load_file\s*\(", "yaml.load_file", "yaml YAML file loader"),
    ],
    output=[
        (r"write\.csv\s*\(", "write.csv", "Base R CSV writer"),
        (r"write\.csv2\s*\(", "write.csv2", "Base R CSV writer (semicolon separated)"),
        (r"write\.table\s*\(", "write.table", "Base R table writer"),
        (r"writeLines\s*\(", "writeLines", "Base R line writer"),
        (r"saveRDS\s*\(", "saveRDS", "Base R RDS writer"),
        (r"save\s*\(", "save", "Base R RData saver"),
        (r"cat\s*\([^)]*file\s*=", "cat", "Base R cat to file"),
        (r"sink\s*\(", "sink", "Base R output sink"),
        (r"write_csv\s*\(", "write_csv", "readr CSV writer"),
        (r"write_csv2\s*\(", "write_csv2", "readr CSV writer (semicolon)"),
        (r"write_tsv\s*\(", "write_tsv", "readr TSV writer"),
        (r"write_delim\s*\(", "write_delim", "readr delimited writer"),
        (r"write_rds\s*\(", "write_rds", "readr RDS writer"),
        (r"fwrite\s*\(", "fwrite", "data.table fast writer"),
        (r"write_xlsx\s*\(", "write_xlsx", "writexl XLSX writer"),
        (r"write\.xlsx\s*\(", "write.xlsx", "openxlsx XLSX writer"),
        (r"toJSON\s*\([^)]*file\s*=", "toJSON", "jsonlite JSON writer (to file)"),
        (r"write_json\s*\(", "write_json", "jsonlite JSON writer"),
        (r"write_parquet\s*\(", "write_parquet", "arrow Parquet writer"),
        (r"write_feather\s*\(", "write_feather", "arrow Feather writer"),
        (r"ggsave\s*\(", "ggsave", "ggplot2 plot saver"),
        (r"pdf\s*\(", "pdf", "Base R PDF device"),
        (r"png\s*\(", "png", "Base R PNG device"),
        (r"jpeg\s*\(", "jpeg", "Base R JPEG device"),
        (r"tiff\s*\(", "tiff", "Base R TIFF device"),
        (r"svg\s*\(", "svg", "Base R SVG device"),
        (r"bmp\s*\(", "bmp", "Base R BMP device"),
        (r"write_sav\s*\(", "write_sav", "haven SPSS writer"),
        (r"write_sas\s*\(", "write_sas", "haven SAS writer"),
        (r"write_dta\s*\(", "write_dta", "haven Stata writer"),
        (r"write_xml\s*\(", "write_xml", "xml2 XML writer"),
        (r"write_yaml\s*\(", "write_yaml", "yaml YAML writer"),
    ],
    dependency=[
        (r"source\s*\(", "source", "R source file"),
        (r"sys\.source\s*\(", "sys.source", "R system source file"),
    ],
)

PYTHON = table(
    input=[
        (r"pd\.read_csv\s*\(|pandas\.read_csv\s*\(", "pd.read_csv", "pandas CSV reader"),
        (r"pd\.read_excel\s*\(|pandas\.read_excel\s*\(", "pd.read_excel", "pandas Excel reader"),
        (r"pd\.read_json\s*\(|pandas\.read_json\s*\(", "pd.read_json", "pandas JSON reader"),
        (r"pd\.read_parquet\s*\(|pandas\.read_parquet\s*\(", "pd.read_parquet", "pandas Parquet reader"),
        (r"pd\.read_feather\s*\(|pandas\.read_feather\s*\(", "pd.read_feather", "pandas Feather reader"),
        (r"pd\.read_pickle\s*\(|pandas\.read_pickle\s*\(", "pd.read_pickle", "pandas pickle reader"),
        (r"pd\.read_sql\s*\(|pandas\.read_sql\s*\(", "pd.read_sql", "pandas SQL reader"),
        (r"pd\.read_html\s*\(|pandas\.read_html\s*\(", "pd.read_html", "pandas HTML reader"),
        (r"open\s*\([^)]*['\"]r['\"]|open\s*\([^,]+\)", "open", "Python built-in file open (read)"),
        (r"json\.load\s*\(", "json.load", "Python JSON loader"),
        (r"pickle\.load\s*\(", "pickle.load", "Python pickle loader"),
        (r"yaml\.safe_load\s*\(|yaml\.load\s*\(", "yaml.load", "Python YAML loader"),
        (r"np\.load\s*\(|numpy\.load\s*\(", "np.load", "numpy array loader"),
        (r"np\.loadtxt\s*\(|numpy\.loadtxt\s*\(", "np.loadtxt", "numpy text loader"),
        (r"np\.genfromtxt\s*\(|numpy\.genfromtxt\s*\(", "np.genfromtxt", "numpy generalized text loader"),
        (r"Image\.open\s*\(", "Image.open", "PIL image opener"),
        (r"cv2\.imread\s*\(", "cv2.imread", "OpenCV image reader"),
        (r"pl\.read_csv\s*\(|polars\.read_csv\s*\(", "pl.read_csv", "polars CSV reader"),
        (r"pl\.read_parquet\s*\(|polars\.read_parquet\s*\(", "pl.read_parquet", "polars Parquet reader"),
    ],
    output=[
        (r"\.to_csv\s*\(", "df.to_csv", "pandas CSV writer"),
        (r"\.to_excel\s*\(", "df.to_excel", "pandas Excel writer"),
        (r"\.to_json\s*\(", "df.to_json", "pandas JSON writer"),
        (r"\.to_parquet\s*\(", "df.to_parquet", "pandas Parquet writer"),
        (r"\.to_feather\s*\(", "df.to_feather", "pandas Feather writer"),
        (r"\.to_pickle\s*\(", "df.to_pickle", "pandas pickle writer"),
        (r"open\s*\([^)]*['\"]w['\"]", "open", "Python built-in file open (write)"),
        (r"json\.dump\s*\(", "json.dump", "Python JSON dumper"),
        (r"pickle\.dump\s*\(", "pickle.dump", "Python pickle dumper"),
        (r"yaml\.dump\s*\(", "yaml.dump", "Python YAML dumper"),
        (r"np\.save\s*\(|numpy\.save\s*\(", "np.save", "numpy array saver"),
        (r"np\.savetxt\s*\(|numpy\.savetxt\s*\(", "np.savetxt", "numpy text saver"),
        (r"np\.savez\s*\(|numpy\.savez\s*\(", "np.savez", "numpy compressed saver"),
        (r"plt\.savefig\s*\(|pyplot\.savefig\s*\(", "plt.savefig", "matplotlib figure saver"),
        (r"\.savefig\s*\(", "fig.savefig", "matplotlib figure saver (method)"),
        (r"\.save\s*\(['\"]", "Image.save", "PIL image saver"),
        (r"cv2\.imwrite\s*\(", "cv2.imwrite", "OpenCV image writer"),
        (r"\.write_csv\s*\(", "df.write_csv", "polars CSV writer"),
        (r"\.write_parquet\s*\(", "df.write_parquet", "polars Parquet writer"),
    ],
    dependency=[
        (r"import\s+\w+|from\s+\w+\s+import", "import", "Python module import"),
        (r"exec\s*\(\s*open\s*\(", "exec(open())", "Python exec open pattern"),
        (r"runpy\.run_path\s*\(", "runpy.run_path", "Python runpy module"),
    ],
)

SQL = table(
    input=[
        (r"FROM\s+([a-zA-Z_][a-zA-Z0-9_]*)", "FROM", "SQL FROM clause (table reference)"),
        (r"JOIN\s+([a-zA-Z_][a-zA-Z0-9_]*)", "JOIN", "SQL JOIN clause (table reference)"),
        (r"LOAD\s+DATA\s+INFILE\s+['\"]([^'\"]+)['\"]", "LOAD DATA INFILE", "MySQL load data from file"),
        (r"COPY\s+\w+\s+FROM\s+['\"]([^'\"]+)['\"]", "COPY FROM", "PostgreSQL copy from file"),
    ],
    output=[
        (r"INTO\s+OUTFILE\s+['\"]([^'\"]+)['\"]", "INTO OUTFILE", "MySQL export to file"),
        (r"COPY\s+\(.*\)\s+TO\s+['\"]([^'\"]+)['\"]", "COPY TO", "PostgreSQL copy to file"),
        (r"CREATE\s+TABLE\s+([a-zA-Z_][a-zA-Z0-9_]*)", "CREATE TABLE", "SQL create table"),
        (r"INSERT\s+INTO\s+([a-zA-Z_][a-zA-Z0-9_]*)", "INSERT INTO", "SQL insert into table"),
    ],
    # SQL no suele depender de otros archivos
)

SHELL = table(
    input=[
        (r"cat\s+([^|>]+)", "cat", "Shell cat command"),
        (r"<\s*([^<>\s]+)", "<", "Shell input redirection"),
        (r"read\s+.*<\s*([^\s]+)", "read <", "Shell read from file"),
        (r"source\s+([^\s;|]+)", "source", "Shell source command"),
        (r"\.\s+([^\s;|]+)", ".", "Shell dot command"),
    ],
    output=[
        (r">\s*([^>\s]+)", ">", "Shell output redirection"),
        (r">>\s*([^>\s]+)", ">>", "Shell append redirection"),
        (r"tee\s+([^|\s]+)", "tee", "Shell tee command"),
    ],
    dependency=[
        (r"source\s+([^\s;|]+)", "source", "Shell source command"),
        (r"\.\s+([^\s;|]+)", ".", "Shell dot command"),
        (r"bash\s+([^\s;|]+)", "bash", "Bash script execution"),
        (r"sh\s+([^\s;|]+)", "sh", "Shell script execution"),
    ],
)

JULIA = table(
    input=[
        (r"CSV\.read\s*\(", "CSV.read", "CSV.jl reader"),
        (r"CSV\.File\s*\(", "CSV.File", "CSV.jl file constructor"),
        (r"DataFrame\s*\(\s*CSV", "DataFrame(CSV)", "DataFrame from CSV"),
        (r"open\s*\([^)]*['\"]r['\"]|open\s*\([^,]+\)\s*do", "open", "Julia open for reading"),
        (r"read\s*\(", "read", "Julia read"),
        (r"readlines\s*\(", "readlines", "Julia readlines"),
        (r"readdlm\s*\(", "readdlm", "Julia delimited reader"),
        (r"JSON\.parsefile\s*\(", "JSON.parsefile", "JSON.jl file parser"),
        (r"@load\s+", "@load", "JLD2 macro loader"),
        (r"load\s*\(", "load", "JLD2 load function"),
        (r"BSON\.load\s*\(", "BSON.load", "BSON.jl loader"),
        (r"Arrow\.Table\s*\(", "Arrow.Table", "Arrow.jl table reader"),
        (r"read_parquet\s*\(", "read_parquet", "Parquet.jl reader"),
    ],
    output=[
        (r"CSV\.write\s*\(", "CSV.write", "CSV.jl writer"),
        (r"open\s*\([^)]*['\"]w['\"]", "open", "Julia open for writing"),
        (r"write\s*\(", "write", "Julia write"),
        (r"writedlm\s*\(", "writedlm", "Julia delimited writer"),
        (r"JSON\.print\s*\(", "JSON.print", "JSON.jl printer"),
        (r"@save\s+", "@save", "JLD2 macro saver"),
        (r"save\s*\(", "save", "JLD2 save function"),
        (r"BSON\.bson\s*\(", "BSON.bson", "BSON.jl writer"),
        (r"Arrow\.write\s*\(", "Arrow.write", "Arrow.jl writer"),
        (r"write_parquet\s*\(", "write_parquet", "Parquet.jl writer"),
        (r"savefig\s*\(", "savefig", "Plots.jl figure saver"),
    ],
    dependency=[
        (r"include\s*\(", "include", "Julia include"),
        (r"using\s+\w+", "using", "Julia using statement"),
        (r"import\s+\w+", "import", "Julia import statement"),
    ],
)
