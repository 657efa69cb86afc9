# -*- coding: utf-8 -*-
"""Patrones para lenguajes compilados: Go, Rust, Java, C y C++."""
from .base import build, table

GO = table(
    input=[
        (r"os\.Open\s*\(", "os.Open", "Go file open"),
        (r"os\.OpenFile\s*\(", "os.OpenFile", "Go file open with flags"),
        (r"os\.ReadFile\s*\(", "os.ReadFile", "Go whole-file read"),
        (r"ioutil\.ReadFile\s*\(", "ioutil.ReadFile", "Go legacy whole-file read"),
        (r"os\.ReadDir\s*\(", "os.ReadDir", "Go directory listing"),
        (r"bufio\.NewReader\s*\(", "bufio.NewReader", "Go buffered reader"),
        (r"bufio\.NewScanner\s*\(", "bufio.NewScanner", "Go line scanner"),
        (r"json\.NewDecoder\s*\(", "json.NewDecoder", "Go JSON stream decoder"),
        (r"json\.Unmarshal\s*\(", "json.Unmarshal", "Go JSON decoder"),
        (r"yaml\.Unmarshal\s*\(", "yaml.Unmarshal", "Go YAML decoder"),
        (r"csv\.NewReader\s*\(", "csv.NewReader", "Go CSV reader"),
        (r"sql\.Open\s*\(", "sql.Open", "Go database/sql connection"),
        (r"gorm\.Open\s*\(", "gorm.Open", "GORM connection"),
        (r"\.QueryRow\s*\(|\.Query\s*\(", "db.Query", "Go SQL query"),
        (r"\.First\s*\(|\.Find\s*\(", "db.Find", "GORM query"),
        (r"http\.Get\s*\(", "http.Get", "Go HTTP GET"),
        (r"http\.NewRequest\s*\(", "http.NewRequest", "Go HTTP request"),
        (r"os\.Getenv\s*\(", "os.Getenv", "Go environment variable"),
        (r"flag\.(String|Int|Bool|Parse)\s*\(", "flag", "Go command-line flags"),
        (r"r\.URL\.Query\s*\(|r\.FormValue\s*\(", "r.URL.Query", "Go HTTP request parameters"),
        (r"c\.(Bind|ShouldBind)\w*\s*\(", "c.Bind", "Gin request binding"),
    ],
    output=[
        (r"os\.Create\s*\(", "os.Create", "Go file create"),
        (r"os\.WriteFile\s*\(", "os.WriteFile", "Go whole-file write"),
        (r"ioutil\.WriteFile\s*\(", "ioutil.WriteFile", "Go legacy whole-file write"),
        (r"os\.MkdirAll\s*\(|os\.Mkdir\s*\(", "os.Mkdir", "Go directory creation"),
        (r"bufio\.NewWriter\s*\(", "bufio.NewWriter", "Go buffered writer"),
        (r"json\.NewEncoder\s*\(", "json.NewEncoder", "Go JSON stream encoder"),
        (r"json\.Marshal\s*\(|json\.MarshalIndent\s*\(", "json.Marshal", "Go JSON encoder"),
        (r"csv\.NewWriter\s*\(", "csv.NewWriter", "Go CSV writer"),
        (r"fmt\.Fprintf\s*\(", "fmt.Fprintf", "Go formatted write to writer"),
        (r"fmt\.Println\s*\(|fmt\.Printf\s*\(", "fmt.Println", "Go console output"),
        (r"\.WriteString\s*\(", "WriteString", "Go string write"),
        (r"\.Exec\s*\(", "db.Exec", "Go SQL statement execution"),
        (r"db\.Create\s*\(", "db.Create", "GORM create"),
        (r"db\.Save\s*\(", "db.Save", "GORM save"),
        (r"http\.Post\s*\(", "http.Post", "Go HTTP POST"),
        (r"w\.Write\s*\(|w\.WriteHeader\s*\(", "w.Write", "Go HTTP response write"),
        (r"c\.JSON\s*\(", "c.JSON", "Gin JSON response"),
        (r"log\.Printf\s*\(|log\.Println\s*\(", "log.Printf", "Go logging"),
    ],
    dependency=[
        (r"^\s*import\s+\(|^\s*import\s+\"", "import", "Go package import"),
        (r"exec\.Command\s*\(", "exec.Command", "Go external command"),
        (r"//go:embed", "//go:embed", "Go embedded file"),
    ],
)

RUST = table(
    input=[
        (r"File::open\s*\(", "File::open", "Rust file open"),
        (r"fs::read_to_string\s*\(", "fs::read_to_string", "Rust whole-file read to string"),
        (r"fs::read\s*\(", "fs::read", "Rust whole-file read to bytes"),
        (r"fs::read_dir\s*\(", "fs::read_dir", "Rust directory listing"),
        (r"BufReader::new\s*\(", "BufReader::new", "Rust buffered reader"),
        (r"\.read_line\s*\(", "read_line", "Rust line read"),
        (r"\.lines\s*\(\s*\)", "lines", "Rust line iterator"),
        (r"io::stdin\s*\(", "io::stdin", "Rust standard input"),
        (r"serde_json::from_reader\s*\(", "serde_json::from_reader", "serde_json reader"),
        (r"serde_json::from_str\s*\(", "serde_json::from_str", "serde_json string parser"),
        (r"serde_yaml::from_\w+\s*\(", "serde_yaml::from_reader", "serde_yaml parser"),
        (r"toml::from_str\s*\(", "toml::from_str", "TOML parser"),
        (r"csv::Reader::from_path\s*\(", "csv::Reader::from_path", "csv crate reader"),
        (r"ReaderBuilder::new\s*\(", "csv::ReaderBuilder", "csv crate reader builder"),
        (r"sqlx::connect\s*\(|PgPool::connect\s*\(", "sqlx::connect", "sqlx connection"),
        (r"sqlx::query\w*!?\s*\(", "sqlx::query", "sqlx query"),
        (r"Connection::open\s*\(", "Connection::open", "rusqlite connection"),
        (r"diesel::\w+::table|\.load::<", "diesel::load", "Diesel query"),
        (r"reqwest::get\s*\(", "reqwest::get", "reqwest GET request"),
        (r"Client::new\s*\(\s*\)\s*\.get", "reqwest::Client::get", "reqwest client GET"),
        (r"env::var\s*\(", "env::var", "Rust environment variable"),
        (r"env::args\s*\(", "env::args", "Rust command-line arguments"),
        (r"Json\s*\(\s*\w+\s*\)\s*:\s*Json<|web::Json<", "web::Json", "Web framework JSON extractor"),
        (r"include_str!\s*\(|include_bytes!\s*\(", "include_str!", "Compile-time file inclusion"),
    ],
    output=[
        (r"File::create\s*\(", "File::create", "Rust file create"),
        (r"fs::write\s*\(", "fs::write", "Rust whole-file write"),
        (r"fs::create_dir(_all)?\s*\(", "fs::create_dir", "Rust directory creation"),
        (r"fs::copy\s*\(", "fs::copy", "Rust file copy"),
        (r"OpenOptions::new\s*\(", "OpenOptions::new", "Rust file open options (append/write)"),
        (r"BufWriter::new\s*\(", "BufWriter::new", "Rust buffered writer"),
        (r"write!\s*\(|writeln!\s*\(", "write!", "Rust formatted write"),
        (r"\.write_all\s*\(", "write_all", "Rust byte write"),
        (r"serde_json::to_writer\w*\s*\(", "serde_json::to_writer", "serde_json writer"),
        (r"serde_json::to_string\w*\s*\(", "serde_json::to_string", "serde_json serializer"),
        (r"serde_yaml::to_\w+\s*\(", "serde_yaml::to_writer", "serde_yaml serializer"),
        (r"csv::Writer::from_path\s*\(", "csv::Writer::from_path", "csv crate writer"),
        (r"\.serialize\s*\(", "serialize", "serde record serialization"),
        (r"\.execute\s*\(", "execute", "SQL statement execution"),
        (r"diesel::insert_into\s*\(", "diesel::insert_into", "Diesel insert"),
        (r"Client::new\s*\(\s*\)\s*\.post|\.post\s*\(", "reqwest::post", "reqwest POST request"),
        (r"println!\s*\(", "println!", "Rust console output"),
        (r"eprintln!\s*\(", "eprintln!", "Rust stderr output"),
        (r"HttpResponse::Ok\s*\(", "HttpResponse::Ok", "actix-web response"),
        (r"info!\s*\(|warn!\s*\(|error!\s*\(", "log::info!", "Rust log macros"),
    ],
    dependency=[
        (r"^\s*mod\s+\w+\s*;", "mod", "Rust module declaration"),
        (r"^\s*use\s+[\w:]+", "use", "Rust use declaration"),
        (r"extern\s+crate\s+\w+", "extern crate", "Rust extern crate"),
        (r"Command::new\s*\(", "Command::new", "Rust external command"),
    ],
)

JAVA = table(
    input=[
        (r"new\s+FileInputStream\s*\(", "new FileInputStream", "Java file input stream"),
        (r"new\s+FileReader\s*\(", "new FileReader", "Java file reader"),
        (r"new\s+BufferedReader\s*\(", "new BufferedReader", "Java buffered reader"),
        (r"new\s+Scanner\s*\(", "new Scanner", "Java scanner"),
        (r"new\s+ObjectInputStream\s*\(", "new ObjectInputStream", "Java object deserialization"),
        (r"Files\.readAllLines\s*\(", "Files.readAllLines", "NIO read all lines"),
        (r"Files\.readString\s*\(", "Files.readString", "NIO read string"),
        (r"Files\.readAllBytes\s*\(", "Files.readAllBytes", "NIO read bytes"),
        (r"Files\.lines\s*\(", "Files.lines", "NIO line stream"),
        (r"Files\.newBufferedReader\s*\(", "Files.newBufferedReader", "NIO buffered reader"),
        (r"Files\.list\s*\(|Files\.walk\s*\(", "Files.walk", "NIO directory walk"),
        (r"getResourceAsStream\s*\(", "getResourceAsStream", "Classpath resource"),
        (r"new\s+Properties\s*\(|\.load\s*\(\s*new\s+FileInputStream", "Properties.load", "Java properties file"),
        (r"DriverManager\.getConnection\s*\(", "DriverManager.getConnection", "JDBC connection"),
        (r"\.executeQuery\s*\(", "executeQuery", "JDBC query"),
        (r"jdbcTemplate\.query\w*\s*\(", "jdbcTemplate.query", "Spring JDBC query"),
        (r"objectMapper\.readValue\s*\(|mapper\.readValue\s*\(", "objectMapper.readValue", "Jackson JSON reader"),
        (r"gson\.fromJson\s*\(", "gson.fromJson", "Gson JSON reader"),
        (r"@RequestBody", "@RequestBody", "Spring request body"),
        (r"@PathVariable", "@PathVariable", "Spring path variable"),
        (r"@RequestParam", "@RequestParam", "Spring request parameter"),
        (r"@Value\s*\(", "@Value", "Spring configuration value"),
        (r"repository\.findById\s*\(|Repository\.findById\s*\(", "repository.findById", "Spring Data lookup"),
        (r"repository\.findAll\s*\(|Repository\.findAll\s*\(", "repository.findAll", "Spring Data query"),
        (r"session\.get\s*\(", "session.get", "Hibernate session lookup"),
        (r"entityManager\.find\s*\(|em\.find\s*\(", "entityManager.find", "JPA lookup"),
        (r"createQuery\s*\(", "createQuery", "JPA/Hibernate query"),
        (r"HttpClient\.newHttpClient\s*\(|restTemplate\.getFor\w+\s*\(", "http.get", "HTTP client request"),
        (r"System\.getenv\s*\(", "System.getenv", "Environment variable"),
        (r"System\.in", "System.in", "Standard input"),
        (r"ImageIO\.read\s*\(", "ImageIO.read", "Image reader"),
    ],
    output=[
        (r"new\s+FileOutputStream\s*\(", "new FileOutputStream", "Java file output stream"),
        (r"new\s+FileWriter\s*\(", "new FileWriter", "Java file writer"),
        (r"new\s+BufferedWriter\s*\(", "new BufferedWriter", "Java buffered writer"),
        (r"new\s+PrintWriter\s*\(", "new PrintWriter", "Java print writer"),
        (r"new\s+ObjectOutputStream\s*\(", "new ObjectOutputStream", "Java object serialization"),
        (r"Files\.write\s*\(", "Files.write", "NIO write bytes/lines"),
        (r"Files\.writeString\s*\(", "Files.writeString", "NIO write string"),
        (r"Files\.newBufferedWriter\s*\(", "Files.newBufferedWriter", "NIO buffered writer"),
        (r"Files\.copy\s*\(", "Files.copy", "NIO file copy"),
        (r"Files\.createDirector(y|ies)\s*\(", "Files.createDirectories", "NIO directory creation"),
        (r"objectMapper\.writeValue\w*\s*\(|mapper\.writeValue\w*\s*\(", "objectMapper.writeValue", "Jackson JSON writer"),
        (r"gson\.toJson\s*\(", "gson.toJson", "Gson JSON writer"),
        (r"\.executeUpdate\s*\(", "executeUpdate", "JDBC update"),
        (r"jdbcTemplate\.update\s*\(", "jdbcTemplate.update", "Spring JDBC update"),
        (r"ResponseEntity", "ResponseEntity", "Spring HTTP response"),
        (r"@ResponseBody", "@ResponseBody", "Spring response body"),
        (r"repository\.save\s*\(|Repository\.save\s*\(", "repository.save", "Spring Data save"),
        (r"repository\.delete\w*\s*\(|Repository\.delete\w*\s*\(", "repository.delete", "Spring Data delete"),
        (r"session\.(save|persist|update)\s*\(", "session.save", "Hibernate save"),
        (r"entityManager\.persist\s*\(|em\.persist\s*\(", "entityManager.persist", "JPA persist"),
        (r"System\.out\.print", "System.out.println", "Standard output"),
        (r"logger\.info\s*\(|log\.info\s*\(", "logger.info", "Logging"),
        (r"ImageIO\.write\s*\(", "ImageIO.write", "Image writer"),
        (r"kafkaTemplate\.send\s*\(", "kafkaTemplate.send", "Kafka producer"),
    ],
    dependency=[
        (r"^\s*import\s+[\w.]+", "import", "Java import"),
        (r"^\s*import\s+static\s+", "import static", "Java static import"),
        (r"Class\.forName\s*\(", "Class.forName", "Reflective class loading"),
        (r"Runtime\.getRuntime\s*\(\s*\)\s*\.exec\s*\(|new\s+ProcessBuilder\s*\(", "ProcessBuilder", "External process"),
        (r"@Autowired", "@Autowired", "Spring dependency injection"),
        (r"@Import\s*\(", "@Import", "Spring configuration import"),
        (r"ServiceLoader\.load\s*\(", "ServiceLoader.load", "Service provider loading"),
    ],
)

C_INPUT = [
    (r"\bfopen\s*\(", "fopen", "C file open"),
    (r"\bfread\s*\(", "fread", "C binary read"),
    (r"\bfgets\s*\(", "fgets", "C line read"),
    (r"\bfgetc\s*\(|\bgetc\s*\(", "fgetc", "C character read"),
    (r"\bfscanf\s*\(", "fscanf", "C formatted file read"),
    (r"\bscanf\s*\(", "scanf", "C formatted stdin read"),
    (r"\bopen\s*\([^)]*O_RDONLY", "open", "POSIX open for reading"),
    (r"\bread\s*\(", "read", "POSIX read"),
    (r"\bmmap\s*\(", "mmap", "Memory-mapped file"),
    (r"\bopendir\s*\(|\breaddir\s*\(", "opendir", "Directory listing"),
    (r"\bgetenv\s*\(", "getenv", "Environment variable"),
    (r"\bgetline\s*\(", "getline", "POSIX line read"),
]

C_OUTPUT = [
    (r"\bfwrite\s*\(", "fwrite", "C binary write"),
    (r"\bfputs\s*\(", "fputs", "C string write"),
    (r"\bfputc\s*\(|\bputc\s*\(", "fputc", "C character write"),
    (r"\bfprintf\s*\(", "fprintf", "C formatted file write"),
    (r"\bprintf\s*\(", "printf", "C formatted stdout write"),
    (r"\bputs\s*\(", "puts", "C line output"),
    (r"\bwrite\s*\(", "write", "POSIX write"),
    (r"\bopen\s*\([^)]*O_(WRONLY|RDWR|CREAT)", "open (write)", "POSIX open for writing"),
    (r"\bmkdir\s*\(", "mkdir", "Directory creation"),
    (r"\bfflush\s*\(", "fflush", "Stream flush"),
]

C_DEPENDENCY = [
    (r"#\s*include\s*[<\"]", "#include", "C preprocessor include"),
    (r"\bdlopen\s*\(", "dlopen", "Dynamic library loading"),
]

CPP_INPUT = [
    (r"\bifstream\b", "ifstream", "C++ input file stream"),
    (r"\bfstream\b", "fstream", "C++ file stream"),
    (r"std::getline\s*\(|\bgetline\s*\(\s*\w+\s*,", "std::getline", "C++ line read"),
    (r"std::cin|\bcin\s*>>", "std::cin", "C++ standard input"),
    (r"std::filesystem::directory_iterator|fs::directory_iterator", "std::filesystem::directory_iterator", "C++17 directory listing"),
    (r"nlohmann::json::parse\s*\(|json::parse\s*\(", "json::parse", "nlohmann JSON parser"),
    (r"YAML::LoadFile\s*\(", "YAML::LoadFile", "yaml-cpp loader"),
    (r"cv::imread\s*\(", "cv::imread", "OpenCV image reader"),
]

CPP_OUTPUT = [
    (r"\bofstream\b", "ofstream", "C++ output file stream"),
    (r"std::cout|\bcout\s*<<", "std::cout", "C++ standard output"),
    (r"std::cerr|\bcerr\s*<<", "std::cerr", "C++ standard error"),
    (r"std::filesystem::create_director(y|ies)|fs::create_director(y|ies)", "std::filesystem::create_directory", "C++17 directory creation"),
    (r"std::filesystem::copy\w*\s*\(|fs::copy\w*\s*\(", "std::filesystem::copy", "C++17 file copy"),
    (r"\.dump\s*\(", "json.dump", "nlohmann JSON serializer"),
    (r"cv::imwrite\s*\(", "cv::imwrite", "OpenCV image writer"),
]

CPP_DEPENDENCY = [
    (r"^\s*import\s+[\w.<\"]", "import", "C++20 module import"),
]

C = {
    "input": build(C_INPUT),
    "output": build(C_OUTPUT),
    "dependency": build(C_DEPENDENCY),
}

CPP = {
    "input": build(C_INPUT + CPP_INPUT),
    "output": build(C_OUTPUT + CPP_OUTPUT),
    "dependency": build(C_DEPENDENCY + CPP_DEPENDENCY),
}
