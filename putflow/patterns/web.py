# -*- coding: utf-8 -*-
"""Patrones para JavaScript y TypeScript (Node, navegador, ORMs, frameworks web)."""
from .base import build

JS_INPUT = [
    # node fs
    (r"fs\.readFileSync\s*\(", "fs.readFileSync", "Node.js synchronous file read"),
    (r"fs\.readFile\s*\(", "fs.readFile", "Node.js asynchronous file read"),
    (r"fs\.promises\.readFile\s*\(|fsPromises\.readFile\s*\(", "fs.promises.readFile", "Node.js promise-based file read"),
    (r"fs\.createReadStream\s*\(", "fs.createReadStream", "Node.js read stream"),
    (r"fs\.readdirSync\s*\(|fs\.readdir\s*\(", "fs.readdir", "Node.js directory listing"),
    (r"readline\.createInterface\s*\(", "readline.createInterface", "Node.js line reader"),
    # red
    (r"\bfetch\s*\(", "fetch", "Fetch API request"),
    (r"axios\.get\s*\(", "axios.get", "axios GET request"),
    (r"axios\s*\(\s*\{", "axios", "axios request (config object)"),
    (r"https?\.get\s*\(", "http.get", "Node.js HTTP GET"),
    (r"new\s+WebSocket\s*\(", "new WebSocket", "WebSocket connection"),
    (r"new\s+EventSource\s*\(", "new EventSource", "Server-sent events stream"),
    # parseo
    (r"JSON\.parse\s*\(", "JSON.parse", "JSON parser"),
    (r"Papa\.parse\s*\(", "Papa.parse", "PapaParse CSV parser"),
    (r"csvParse\s*\(|\.pipe\s*\(\s*csv\s*\(", "csv-parse", "CSV stream parser"),
    (r"XLSX\.readFile\s*\(", "XLSX.readFile", "SheetJS workbook reader"),
    (r"require\s*\(\s*['\"][^'\"]+\.json['\"]\s*\)", "require(json)", "JSON file required as module"),
    # bases de datos
    (r"mongoose\.connect\s*\(", "mongoose.connect", "Mongoose MongoDB connection"),
    (r"MongoClient\.connect\s*\(", "MongoClient.connect", "MongoDB driver connection"),
    (r"new\s+PrismaClient\s*\(", "new PrismaClient", "Prisma client"),
    (r"prisma\.\w+\.find(Many|Unique|First)\s*\(", "prisma.find", "Prisma query"),
    (r"\.findAll\s*\(", "Model.findAll", "Sequelize query"),
    (r"\.findOne\s*\(", "Model.findOne", "ORM single-record query"),
    (r"new\s+Pool\s*\(", "new Pool", "node-postgres connection pool"),
    (r"mysql2?\.createConnection\s*\(", "mysql.createConnection", "MySQL connection"),
    (r"new\s+sqlite3\.Database\s*\(", "new sqlite3.Database", "SQLite database handle"),
    (r"\.query\s*\(\s*['\"`]\s*SELECT", "db.query(SELECT)", "SQL SELECT query"),
    # entorno / peticiones
    (r"process\.env\.", "process.env", "Environment variable"),
    (r"process\.argv", "process.argv", "Command-line arguments"),
    (r"req\.body", "req.body", "Express request body"),
    (r"req\.params", "req.params", "Express route parameters"),
    (r"req\.query", "req.query", "Express query string"),
    # navegador
    (r"localStorage\.getItem\s*\(", "localStorage.getItem", "Browser local storage read"),
    (r"new\s+FileReader\s*\(|\.readAsText\s*\(", "FileReader", "Browser file reader"),
]

JS_OUTPUT = [
    (r"fs\.writeFileSync\s*\(", "fs.writeFileSync", "Node.js synchronous file write"),
    (r"fs\.writeFile\s*\(", "fs.writeFile", "Node.js asynchronous file write"),
    (r"fs\.promises\.writeFile\s*\(|fsPromises\.writeFile\s*\(", "fs.promises.writeFile", "Node.js promise-based file write"),
    (r"fs\.appendFileSync\s*\(|fs\.appendFile\s*\(", "fs.appendFile", "Node.js file append"),
    (r"fs\.createWriteStream\s*\(", "fs.createWriteStream", "Node.js write stream"),
    (r"fs\.mkdirSync\s*\(|fs\.mkdir\s*\(", "fs.mkdir", "Node.js directory creation"),
    (r"fs\.copyFileSync\s*\(|fs\.copyFile\s*\(", "fs.copyFile", "Node.js file copy"),
    (r"module\.exports", "module.exports", "CommonJS export"),
    (r"export\s+default", "export default", "ES module default export"),
    (r"export\s+(const|let|function|class|async)\b", "export", "ES module named export"),
    (r"res\.send\s*\(", "res.send", "Express response"),
    (r"res\.json\s*\(", "res.json", "Express JSON response"),
    (r"res\.render\s*\(", "res.render", "Express template render"),
    (r"res\.sendFile\s*\(", "res.sendFile", "Express file response"),
    (r"res\.download\s*\(", "res.download", "Express file download"),
    (r"res\.write\s*\(", "res.write", "HTTP response stream write"),
    (r"console\.log\s*\(", "console.log", "Console output"),
    (r"JSON\.stringify\s*\(", "JSON.stringify", "JSON serializer"),
    (r"XLSX\.writeFile\s*\(", "XLSX.writeFile", "SheetJS workbook writer"),
    (r"localStorage\.setItem\s*\(", "localStorage.setItem", "Browser local storage write"),
    (r"axios\.(post|put|patch)\s*\(", "axios.post", "axios write request"),
    (r"\.insertOne\s*\(|\.insertMany\s*\(", "collection.insert", "MongoDB insert"),
    (r"prisma\.\w+\.(create|update|upsert|delete)\s*\(", "prisma.create", "Prisma write"),
    (r"\.save\s*\(\s*\)", "model.save", "ORM model save"),
    (r"\.query\s*\(\s*['\"`]\s*(INSERT|UPDATE|DELETE)", "db.query(INSERT)", "SQL write query"),
    (r"saveAs\s*\(", "saveAs", "FileSaver download"),
]

JS_DEPENDENCY = [
    (r"require\s*\(\s*['\"]", "require", "CommonJS require"),
    (r"import\s+.+\s+from\s+['\"]", "import from", "ES module import"),
    (r"import\s+['\"]", "import", "ES module side-effect import"),
    (r"import\s*\(\s*['\"]", "import()", "Dynamic import"),
    (r"new\s+Worker\s*\(", "new Worker", "Web/worker thread script"),
    (r"child_process|spawn\s*\(|execFile\s*\(", "child_process", "Child process execution"),
    (r"importScripts\s*\(", "importScripts", "Worker script import"),
]

TS_INPUT = [
    (r"///\s*<reference\s+path\s*=", "/// <reference path>", "TypeScript triple-slash path reference"),
    (r"///\s*<reference\s+types\s*=", "/// <reference types>", "TypeScript triple-slash types reference"),
    (r"@Controller\s*\(", "@Controller", "NestJS controller"),
    (r"@Body\s*\(", "@Body", "NestJS request body"),
    (r"@Param\s*\(", "@Param", "NestJS route parameter"),
    (r"@Query\s*\(", "@Query", "NestJS query parameter"),
    (r"@Get\s*\(", "@Get", "NestJS GET handler"),
    (r"@InjectRepository\s*\(", "@InjectRepository", "NestJS TypeORM repository injection"),
    (r"new\s+DataSource\s*\(", "new DataSource", "TypeORM data source"),
    (r"getRepository\s*\(", "getRepository", "TypeORM repository"),
    (r"Repository\.find(One|By|OneBy)?\s*\(|repository\.find\w*\s*\(", "repository.find", "TypeORM query"),
    (r"this\.http\.get\s*[<(]", "HttpClient.get", "Angular HttpClient GET"),
    (r"@Input\s*\(", "@Input", "Angular component input"),
    (r"import\.meta\.env", "import.meta.env", "Vite environment variable"),
]

TS_OUTPUT = [
    (r"@Post\s*\(", "@Post", "NestJS POST handler"),
    (r"@Put\s*\(|@Patch\s*\(", "@Put", "NestJS update handler"),
    (r"@Output\s*\(", "@Output", "Angular component output"),
    (r"new\s+EventEmitter\s*<", "new EventEmitter", "Angular event emitter"),
    (r"repository\.save\s*\(|Repository\.save\s*\(", "repository.save", "TypeORM save"),
    (r"this\.http\.(post|put|patch)\s*[<(]", "HttpClient.post", "Angular HttpClient write"),
]

TS_DEPENDENCY = [
    (r"import\s+type\s+", "import type", "TypeScript type-only import"),
    (r"@Module\s*\(", "@Module", "NestJS module declaration"),
]

JAVASCRIPT = {
    "input": build(JS_INPUT),
    "output": build(JS_OUTPUT),
    "dependency": build(JS_DEPENDENCY),
}

TYPESCRIPT = {
    "input": build(JS_INPUT + TS_INPUT),
    "output": build(JS_OUTPUT + TS_OUTPUT),
    "dependency": build(JS_DEPENDENCY + TS_DEPENDENCY),
}
